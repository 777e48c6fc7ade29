import pytest

from contact_directory_api.app.schemas.contact import Contact
from contact_directory_api.app.services.validation import validate_contact


def _fields(violations):
    return [v.field for v in violations]


def test_valid_contact_has_no_violations(jessica):
    assert validate_contact(jessica) == []


def test_minimal_contact_is_valid():
    assert validate_contact(Contact(name="A")) == []


def test_null_contact_is_rejected():
    assert _fields(validate_contact(None)) == ["contact"]


@pytest.mark.parametrize("name", [None, "", "   "])
def test_blank_name_is_rejected(name):
    assert _fields(validate_contact(Contact(name=name))) == ["name"]


def test_name_length_limit():
    assert validate_contact(Contact(name="x" * 100)) == []
    assert _fields(validate_contact(Contact(name="x" * 101))) == ["name"]


@pytest.mark.parametrize("phone", ["62482211", "+62 (21) 482-211", "021.555.1234", "1234567"])
def test_well_formed_phone_numbers(phone):
    assert validate_contact(Contact(name="A", phone=phone)) == []


@pytest.mark.parametrize("phone", ["abc", "123456", "++1234567", "12345678x", "1234567\n"])
def test_malformed_phone_numbers(phone):
    assert _fields(validate_contact(Contact(name="A", phone=phone))) == ["phone"]


def test_phone_longer_than_limit_reports_size():
    violations = validate_contact(Contact(name="A", phone="+" + "1" * 25))
    assert _fields(violations) == ["phone"]
    assert "size" in violations[0].message


def test_email_syntax():
    assert validate_contact(Contact(name="A", email="jessica@ngilang.com")) == []
    assert _fields(validate_contact(Contact(name="A", email="not-an-email"))) == ["email"]
    assert _fields(validate_contact(Contact(name="A", email="a@"))) == ["email"]


def test_blank_email_is_treated_as_absent():
    assert validate_contact(Contact(name="A", email="")) == []


def test_address_and_note_limits_use_wire_names():
    contact = Contact(
        name="A",
        address1="a" * 51,
        address2="b" * 50,
        address3="c" * 51,
        postal_code="1" * 21,
        note="n" * 4001,
    )
    assert _fields(validate_contact(contact)) == ["address1", "address3", "postalCode", "note"]


def test_all_violations_are_reported_in_field_order():
    contact = Contact(name="", phone="abc", email="nope")
    assert _fields(validate_contact(contact)) == ["name", "phone", "email"]


def test_violation_messages():
    contact = Contact(name="x" * 101, phone="abc", email="nope", note="n" * 4001)
    messages = {v.field: v.message for v in validate_contact(contact)}
    assert messages == {
        "name": "size must be between 0 and 100",
        "phone": "must be a valid phone number",
        "email": "must be a well-formed email address",
        "note": "size must be between 0 and 4000",
    }
    assert validate_contact(Contact(name=" "))[0].message == "must not be blank"


def test_email_length_limit():
    address = "a@" + "b" * 60 + "." + "c" * 34 + ".com"
    assert len(address) == 101
    assert _fields(validate_contact(Contact(name="A", email=address))) == ["email"]
    assert validate_contact(Contact(name="A", email=address[:-5] + ".com")) == []
