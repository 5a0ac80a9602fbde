"""
Typed conversion of raw row values.

The reader keeps every value as the string found in the file; this
module converts values according to their attribute. Dispatch is
exhaustive over the attribute classes: an unknown class raises
TypeError instead of passing values through.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Dict, List, Sequence

from arffdoc.errors import CoercionError, UnsupportedFeatureError
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
from arffdoc.tokenizer import unquote


# SimpleDateFormat letters -> strptime directives
_DATE_DIRECTIVES: Dict[str, str] = {
    "yyyy": "%Y",
    "yy": "%y",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
    "SSS": "%f",
    "Z": "%z",
}

_DATE_TOKEN_RE = re.compile(r"'([^']*)'|(yyyy|yy|MM|dd|HH|mm|ss|SSS|Z)|([A-Za-z])|([^A-Za-z']+)")


def java_date_format_to_strptime(pattern: str) -> str:
    """
    Translate a SimpleDateFormat pattern into a strptime format.

    Only the common letters are supported (yyyy yy MM dd HH mm ss SSS Z);
    quoted text is copied literally.

    Raises:
        CoercionError: For pattern letters outside that set
    """
    out = []
    for literal, directive, unknown, other in _DATE_TOKEN_RE.findall(pattern):
        if directive:
            out.append(_DATE_DIRECTIVES[directive])
        elif unknown:
            raise CoercionError(f"Unsupported date pattern letter {unknown!r} in {pattern!r}")
        else:
            text = literal or other
            out.append(text.replace("%", "%%"))
    return "".join(out)


def _strip(raw: str) -> str:
    return unquote(raw.strip())


def _parse_date(attribute: DateAttribute, value: str) -> datetime:
    if not attribute.date_format:
        return datetime.fromisoformat(value)
    return datetime.strptime(value, java_date_format_to_strptime(attribute.date_format))


def coerce_value(attribute: Attribute, raw: str) -> Any:
    """
    Convert one raw value for its attribute.

    Returns:
        float for numeric and real, int for integer, str for string,
        the enumeration index for nominal, datetime for date

    Raises:
        CoercionError: If the value does not fit the attribute
        UnsupportedFeatureError: For relational placeholders
        TypeError: For an attribute class this module does not know
    """
    value = _strip(raw)
    try:
        if isinstance(attribute, (NumericAttribute, RealAttribute)):
            return float(value)
        if isinstance(attribute, IntegerAttribute):
            return int(value)
        if isinstance(attribute, StringAttribute):
            return value
        if isinstance(attribute, NominalAttribute):
            index = attribute.index_of(value)
            if index is None:
                raise CoercionError(
                    f"{value!r} is not a declared value of {attribute.name!r}"
                )
            return index
        if isinstance(attribute, DateAttribute):
            return _parse_date(attribute, value)
    except CoercionError:
        raise
    except ValueError as e:
        raise CoercionError(
            f"Cannot read {raw!r} as {attribute.type_name} for {attribute.name!r}: {e}"
        ) from e

    if isinstance(attribute, RelationalAttribute):
        raise UnsupportedFeatureError(f"relational attribute {attribute.name!r}")
    raise TypeError(f"Unsupported Attribute type: {type(attribute)}")


def coerce_row(attributes: Sequence[Attribute], row: Sequence[str]) -> List[Any]:
    if len(attributes) != len(row):
        raise CoercionError(f"Row has {len(row)} values for {len(attributes)} attributes")
    return [coerce_value(attr, raw) for attr, raw in zip(attributes, row)]


def typed_rows(document: Document) -> List[List[Any]]:
    """All rows of a document, converted."""
    return [coerce_row(document.attributes, row) for row in document.rows]


__all__ = [
    "coerce_value",
    "coerce_row",
    "typed_rows",
    "java_date_format_to_strptime",
]
