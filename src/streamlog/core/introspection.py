from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from typing import Any, Literal

ROOT_ELEMENT = "StreamlogConfig"

DumpFormat = Literal["json", "xml"]


def dump_config(
    snapshot: dict[str, Any],
    *,
    fmt: DumpFormat = "json",
    pretty: bool = False,
) -> str:
    """
    Serialize a session snapshot.

    :param snapshot: Output of :meth:`Session.snapshot`.
    :param fmt: ``"json"`` or ``"xml"``.
    :param pretty: Indent the output instead of producing a compact string.
    :raises ValueError: If ``fmt`` is not supported.
    """
    fmt = fmt.lower()

    if fmt == "json":
        if pretty:
            return json.dumps(snapshot, indent=4, ensure_ascii=False)
        return json.dumps(snapshot, separators=(",", ":"), ensure_ascii=False)

    if fmt == "xml":
        root = ET.Element(ROOT_ELEMENT)
        for key, value in snapshot.items():
            element = ET.SubElement(root, key)
            if value is None:
                continue
            element.text = str(value).lower() if isinstance(value, bool) else str(value)
        if pretty:
            ET.indent(root, space="    ")
        return ET.tostring(root, encoding="unicode")

    raise ValueError(f"Unsupported config format: {fmt!r} (expected 'json' or 'xml')")
