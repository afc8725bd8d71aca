import json
import xml.etree.ElementTree as ET

import pytest

from streamlog.core.introspection import dump_config

SNAPSHOT = {
    "LogLevel": "Info",
    "Console": True,
    "FilePath": None,
    "TabSize": 4,
}


def test_compact_json() -> None:
    """Compact JSON has no whitespace at all."""
    text = dump_config(SNAPSHOT)

    assert "\n" not in text and " " not in text
    assert json.loads(text) == SNAPSHOT


def test_pretty_json() -> None:
    """Pretty JSON is indented by four spaces."""
    text = dump_config(SNAPSHOT, pretty=True)

    assert text.startswith("{\n    ")
    assert json.loads(text) == SNAPSHOT


def test_xml() -> None:
    """Booleans are lowercase and None gives an empty element."""
    root = ET.fromstring(dump_config(SNAPSHOT, fmt="xml"))

    assert root.tag == "StreamlogConfig"
    assert root.find("LogLevel").text == "Info"
    assert root.find("Console").text == "true"
    assert root.find("FilePath").text is None
    assert root.find("TabSize").text == "4"


def test_pretty_xml_is_indented() -> None:
    """Pretty XML puts each setting on its own indented line."""
    text = dump_config(SNAPSHOT, fmt="XML", pretty=True)

    assert "\n    <LogLevel>Info</LogLevel>" in text


def test_unknown_format() -> None:
    """Formats other than JSON and XML are rejected."""
    with pytest.raises(ValueError):
        dump_config(SNAPSHOT, fmt="toml")
