"""Record serializers for the three output formats."""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Sequence

from .errors import UnsupportedFormatError
from .models import OutputFormat, Record
from .rules import (
    MARKDOWN_RECORD_SEPARATOR,
    SYNTHETIC_COLUMN_PREFIX,
    XML_DECLARATION,
    XML_ITEM_TAG,
    XML_ROOT_TAG,
)

_YAML_QUOTE_TRIGGER = re.compile(r"[\s:]")
_XML_NAME_STRIP = re.compile(r"[^A-Za-z0-9_]")


def to_markdown(records: Sequence[Record]) -> str:
    blocks = []
    for record in records:
        lines = [f"- {key}: {value}" for key, value in record.items()]
        lines.append(MARKDOWN_RECORD_SEPARATOR)
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def _yaml_scalar(value: str) -> str:
    # Minimal heuristic, not full YAML scalar safety.
    if _YAML_QUOTE_TRIGGER.search(value):
        return f'"{value}"'
    return value


def to_yaml(records: Sequence[Record]) -> str:
    blocks = []
    for record in records:
        lines = []
        for i, (key, value) in enumerate(record.items()):
            prefix = "- " if i == 0 else "  "
            lines.append(f"{prefix}{key}: {_yaml_scalar(value)}")
        blocks.append("\n".join(lines))
    return "\n".join(blocks)


def escape_xml_text(value: str) -> str:
    # & must go first so inserted entities are not escaped again
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def xml_element_name(key: str, position: int) -> str:
    """
    Turn a record key into a legal element name.

    Characters outside [A-Za-z0-9_] are dropped. A name left empty falls
    back to column_<position>; a name starting with a digit gets a leading
    underscore.
    """
    name = _XML_NAME_STRIP.sub("", key)
    if not name:
        return f"{SYNTHETIC_COLUMN_PREFIX}{position}"
    if name[0].isdigit():
        return f"_{name}"
    return name


def to_xml(records: Sequence[Record]) -> str:
    lines = [XML_DECLARATION, f"<{XML_ROOT_TAG}>"]
    for record in records:
        lines.append(f"  <{XML_ITEM_TAG}>")
        for position, (key, value) in enumerate(record.items(), start=1):
            tag = xml_element_name(key, position)
            lines.append(f"    <{tag}>{escape_xml_text(value)}</{tag}>")
        lines.append(f"  </{XML_ITEM_TAG}>")
    lines.append(f"</{XML_ROOT_TAG}>")
    return "\n".join(lines)


SERIALIZERS: Dict[OutputFormat, Callable[[Sequence[Record]], str]] = {
    OutputFormat.MARKDOWN: to_markdown,
    OutputFormat.YAML: to_yaml,
    OutputFormat.XML: to_xml,
}


def resolve_format(output_format: object) -> OutputFormat:
    try:
        return OutputFormat(output_format)
    except ValueError as exc:
        raise UnsupportedFormatError(output_format) from exc


def serialize(records: List[Record], output_format: object) -> str:
    return SERIALIZERS[resolve_format(output_format)](records)
