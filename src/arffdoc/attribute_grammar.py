"""
Attribute declaration grammar.

Turns the tokenized fields of one @ATTRIBUTE line into an Attribute:

    fields[0]  the @ATTRIBUTE tag itself
    fields[1]  attribute name
    fields[2]  type token: NUMERIC | INTEGER | REAL | STRING | DATE
               | RELATIONAL | {v1, v2, ...}
    fields[3]  optional, DATE format only

Type keywords are matched case-insensitively.
"""

from typing import Callable, Dict, List, Sequence, Tuple

from arffdoc.errors import InvalidAttributeError, UnsupportedFeatureError
from arffdoc.model import (
    Attribute,
    DateAttribute,
    IntegerAttribute,
    NominalAttribute,
    NumericAttribute,
    RealAttribute,
    StringAttribute,
)
from arffdoc.tokenizer import WHITESPACE, unquote


_SIMPLE_TYPES: Dict[str, Callable[[str], Attribute]] = {
    "NUMERIC": NumericAttribute,
    "INTEGER": IntegerAttribute,
    "REAL": RealAttribute,
    "STRING": StringAttribute,
}

RELATIONAL = "RELATIONAL"


def parse_attribute(fields: Sequence[str]) -> Attribute:
    """
    Validate and classify one attribute declaration.

    Args:
        fields: Tokenized @ATTRIBUTE line (tag included)

    Returns:
        The declared Attribute

    Raises:
        InvalidAttributeError: If the declaration is malformed. A 4th
            field is accepted only as the format of a DATE attribute.
        UnsupportedFeatureError: For relational attributes, with or
            without a 4th field
    """
    if len(fields) not in (3, 4):
        raise InvalidAttributeError(
            f"@ATTRIBUTE takes a name, a type and an optional date format; got {len(fields)} fields"
        )

    name = fields[1]
    type_token = fields[2]
    keyword = type_token.upper()

    if keyword == "DATE":
        date_format = fields[3] if len(fields) == 4 else ""
        return DateAttribute(name=name, date_format=date_format)

    if keyword == RELATIONAL:
        raise UnsupportedFeatureError(f"relational attribute {name!r}")

    if len(fields) == 4:
        raise InvalidAttributeError(f"Only DATE attributes take a format, got type {type_token!r}")

    if keyword in _SIMPLE_TYPES:
        return _SIMPLE_TYPES[keyword](name)

    return NominalAttribute(name=name, values=parse_nominal_values(type_token))


def parse_nominal_values(type_token: str) -> Tuple[str, ...]:
    """
    Parse a {v1, v2, ...} value list.

    The token must start with '{', end with '}' and contain at least one ','.
    Pieces are split on commas outside quotes, trimmed of whitespace and of
    one pair of surrounding quotes.

    Raises:
        InvalidAttributeError: If the list is malformed, or a literal is
            empty or repeated
    """
    if not (type_token.startswith("{") and type_token.endswith("}") and "," in type_token):
        raise InvalidAttributeError(f"Unknown attribute type {type_token!r}")

    values: List[str] = []
    for piece in _split_outside_quotes(type_token[1:-1]):
        value = unquote(piece.strip(WHITESPACE))
        if value == "":
            raise InvalidAttributeError(f"Empty nominal value in {type_token!r}")
        if value in values:
            raise InvalidAttributeError(f"Duplicate nominal value {value!r} in {type_token!r}")
        values.append(value)
    return tuple(values)


def _split_outside_quotes(text: str) -> List[str]:
    pieces = []
    buf = []
    quote = None
    for ch in text:
        if quote is not None:
            if ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch == ",":
            pieces.append("".join(buf))
            buf = []
            continue
        buf.append(ch)
    pieces.append("".join(buf))
    return pieces


__all__ = ["parse_attribute", "parse_nominal_values", "RELATIONAL"]
