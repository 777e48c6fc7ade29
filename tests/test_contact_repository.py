from contact_directory_api.app.core.db import MIGRATIONS, init_db
from contact_directory_api.app.repositories import ContactRepository
from contact_directory_api.app.repositories.contact_repository import escape_like
from contact_directory_api.app.schemas.contact import Address, Contact


def _insert_names(repository, *names):
    return [repository.insert(Contact(name=name)) for name in names]


def test_init_db_is_idempotent(db_path):
    assert init_db(db_path) == MIGRATIONS[-1][0]
    assert init_db(db_path) == MIGRATIONS[-1][0]


def test_insert_assigns_increasing_ids_and_ignores_given_id(repository):
    first = repository.insert(Contact(id=99, name="First"))
    second = repository.insert(Contact(name="Second"))
    assert first == 1
    assert second == 2
    assert repository.get_by_id(99) is None


def test_get_by_id_round_trips_every_field(repository):
    contact = Contact(
        name="Jessica Abigail",
        phone="62482211",
        email="jessica@ngilang.com",
        address1="888 Constantine Ave, #54",
        address2="San Angeles",
        address3="Florida",
        postal_code="32106",
        note="Meet her at Spring Boot Conference",
    )
    contact_id = repository.insert(contact)
    stored = repository.get_by_id(contact_id)
    assert stored == contact.model_copy(update={"id": contact_id})


def test_ids_are_not_reused_after_delete(repository):
    first, second = _insert_names(repository, "A", "B")
    assert repository.delete(second) is True
    third = repository.insert(Contact(name="C"))
    assert third > second
    assert repository.exists_by_id(first)
    assert not repository.exists_by_id(second)


def test_find_all_is_ordered_and_paginated(repository):
    ids = _insert_names(repository, "A", "B", "C", "D", "E", "F", "G")
    assert [c.id for c in repository.find_all(5, 0)] == ids[:5]
    assert [c.id for c in repository.find_all(5, 5)] == ids[5:]
    assert repository.find_all(5, 10) == []


def test_find_all_by_name_is_case_insensitive_substring(repository):
    _insert_names(repository, "Jessica Abigail", "Abigail Jones", "Bob")
    names = [c.name for c in repository.find_all_by_name("aBiG", 10, 0)]
    assert names == ["Jessica Abigail", "Abigail Jones"]


def test_find_all_by_name_matches_wildcards_literally(repository):
    _insert_names(repository, "100% Real", "1000 Real", "a_b", "axb")
    assert [c.name for c in repository.find_all_by_name("%", 10, 0)] == ["100% Real"]
    assert [c.name for c in repository.find_all_by_name("_", 10, 0)] == ["a_b"]


def test_escape_like():
    assert escape_like("50%_off\\") == "50\\%\\_off\\\\"


def test_find_duplicate_matches_name_case_insensitively_and_phone_exactly(repository):
    contact_id = repository.insert(Contact(name="Jessica Abigail", phone="62482211"))
    assert repository.find_duplicate("  jessica abigail ", "62482211").id == contact_id
    assert repository.find_duplicate("Jessica Abigail", "62482212") is None
    assert repository.find_duplicate("Jessica Abigail", None) is None


def test_find_duplicate_treats_missing_phones_as_equal(repository):
    contact_id = repository.insert(Contact(name="No Phone"))
    assert repository.find_duplicate("no phone", None).id == contact_id


def test_update_and_delete_report_missing_rows(repository):
    assert repository.update(Contact(id=42, name="Ghost")) is False
    assert repository.delete(42) is False


def test_update_replaces_all_fields(repository):
    contact_id = repository.insert(Contact(name="Old", phone="62482211", note="keep?"))
    repository.update(Contact(id=contact_id, name="New"))
    stored = repository.get_by_id(contact_id)
    assert stored.name == "New"
    assert stored.phone is None
    assert stored.note is None


def test_count(repository):
    assert repository.count() == 0
    _insert_names(repository, "A", "B")
    assert repository.count() == 2


def test_update_address_writes_only_address_columns(repository):
    contact_id = repository.insert(
        Contact(name="Jessica Abigail", phone="62482211", address1="Old street", address3="Old state", note="A note")
    )
    assert repository.update_address(contact_id, Address(address1="888 Constantine Ave, #54", postal_code="32106"))
    stored = repository.get_by_id(contact_id)
    assert (stored.address1, stored.address2, stored.address3, stored.postal_code) == (
        "888 Constantine Ave, #54",
        None,
        None,
        "32106",
    )
    assert (stored.name, stored.phone, stored.note) == ("Jessica Abigail", "62482211", "A note")
    assert repository.update_address(42, Address(address1="Nowhere")) is False


def test_ids_outside_integer_range_are_absent(repository):
    _insert_names(repository, "A")
    for contact_id in (2**63, -(2**63) - 1, 2**80):
        assert repository.get_by_id(contact_id) is None
        assert repository.exists_by_id(contact_id) is False
        assert repository.update(Contact(id=contact_id, name="B")) is False
        assert repository.update_address(contact_id, Address(address1="x")) is False
        assert repository.delete(contact_id) is False
    assert repository.count() == 1


def test_offsets_outside_integer_range_give_empty_pages(repository):
    _insert_names(repository, "A", "B")
    assert repository.find_all(5, 2**63) == []
    assert repository.find_all_by_name("A", 5, 2**70) == []
    assert [c.name for c in repository.find_all(2**64, 0)] == ["A", "B"]
