"""
ARFF text generator for arffdoc documents.

Converts a Document back into ARFF text that the reader accepts and
that reads back into an equal Document.

The format has no escape sequences, so some values cannot be written:
    - a name or literal holding both quote characters or a line break
    - a data value holding a comma or a line break
These raise ValueError instead of producing text that reads back wrong.
"""

from typing import List

from arffdoc.errors import UnsupportedFeatureError
from arffdoc.model import (
    Attribute,
    DateAttribute,
    Document,
    IntegerAttribute,
    NominalAttribute,
    NumericAttribute,
    RealAttribute,
    RelationalAttribute,
    StringAttribute,
)
from arffdoc.tokenizer import WHITESPACE


_HEADER_SPECIALS = set(WHITESPACE) | set("'\"{},%")
_NOMINAL_SPECIALS = set("'\"{},")


def _quote(text: str) -> str:
    """Wrap text in whichever quote character it does not contain."""
    if "'" not in text:
        return f"'{text}'"
    if '"' not in text:
        return f'"{text}"'
    raise ValueError(f"Cannot quote {text!r}: it contains both quote characters")


def _reject_line_breaks(text: str) -> None:
    if "\r" in text or "\n" in text:
        raise ValueError(f"Cannot write {text!r}: header lines cannot hold a line break")


def _header_token(text: str) -> str:
    _reject_line_breaks(text)
    if text == "" or any(ch in _HEADER_SPECIALS for ch in text):
        return _quote(text)
    return text


def _nominal_literal(value: str) -> str:
    _reject_line_breaks(value)
    if value != value.strip(WHITESPACE) or any(ch in _NOMINAL_SPECIALS for ch in value):
        return _quote(value)
    return value


def _type_token(attr: Attribute) -> str:
    if isinstance(attr, (NumericAttribute, IntegerAttribute, RealAttribute, StringAttribute)):
        return attr.type_name.upper()
    if isinstance(attr, NominalAttribute):
        if len(attr.values) < 2:
            raise ValueError(f"Nominal attribute {attr.name!r} needs at least two values")
        return "{" + ",".join(_nominal_literal(v) for v in attr.values) + "}"
    if isinstance(attr, DateAttribute):
        if attr.date_format:
            return f"DATE {_header_token(attr.date_format)}"
        return "DATE"
    if isinstance(attr, RelationalAttribute):
        raise UnsupportedFeatureError(f"relational attribute {attr.name!r}")
    raise TypeError(f"Unsupported Attribute type: {type(attr)}")


def _data_line(row: List[str], width: int) -> str:
    if len(row) != width:
        raise ValueError(f"Row {row!r} has {len(row)} values for {width} attributes")
    for value in row:
        if any(ch in value for ch in ",\r\n"):
            raise ValueError(f"Data value {value!r} cannot be written without escapes")
    line = ",".join(row)
    if not line.strip() or line.startswith("%"):
        raise ValueError(f"Row {row!r} would read back as a blank or comment line")
    return line


def generate_arff(document: Document) -> str:
    """
    Generate ARFF text for a document.

    Args:
        document: Document to write

    Returns:
        ARFF text, newline terminated
    """
    lines = []

    lines.append(f"@RELATION {_header_token(document.relation)}")
    lines.append("")

    for attr in document.attributes:
        lines.append(f"@ATTRIBUTE {_header_token(attr.name)} {_type_token(attr)}")

    lines.append("")
    lines.append("@DATA")

    width = len(document.attributes)
    for row in document.rows:
        lines.append(_data_line(row, width))

    return "\n".join(lines) + "\n"


def save_arff_file(document: Document, filename: str) -> None:
    """
    Generate ARFF and save to file.

    Args:
        document: Document to write
        filename: Output file path (.arff extension recommended)
    """
    arff = generate_arff(document)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(arff)


__all__ = ["generate_arff", "save_arff_file"]
