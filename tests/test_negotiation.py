import xml.etree.ElementTree as ET

import pytest

from contact_directory_api.app.api.negotiation import (
    JSON_MEDIA_TYPE,
    XML_MEDIA_TYPE,
    preferred_media_type,
    to_xml,
)


@pytest.mark.parametrize(
    "accept, expected",
    [
        (None, JSON_MEDIA_TYPE),
        ("*/*", JSON_MEDIA_TYPE),
        ("application/json", JSON_MEDIA_TYPE),
        ("application/xml", XML_MEDIA_TYPE),
        ("text/xml", XML_MEDIA_TYPE),
        ("application/json, application/xml", JSON_MEDIA_TYPE),
        ("application/json;q=0.5, application/xml", XML_MEDIA_TYPE),
        ("application/xml;q=0, */*", JSON_MEDIA_TYPE),
        ("text/html", JSON_MEDIA_TYPE),
    ],
)
def test_preferred_media_type(accept, expected):
    assert preferred_media_type(accept) == expected


def test_to_xml_leaves_missing_values_empty():
    xml = to_xml({"id": 1, "name": "A & B", "phone": None}, "Contact")
    assert xml == "<Contact><id>1</id><name>A &amp; B</name><phone /></Contact>"


def test_to_xml_drops_characters_xml_cannot_carry():
    xml = to_xml({"name": "Ctl", "note": "a\x01b\x0bc\ud800d\tok"}, "Contact")
    assert xml == "<Contact><name>Ctl</name><note>abcd\tok</note></Contact>"
    assert ET.fromstring(xml).findtext("note") == "abcd\tok"
