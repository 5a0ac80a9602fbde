"""
Core ARFF Document Objects

Defines the in-memory representation of a parsed ARFF document:
    - Attributes (schema columns), a closed family of frozen dataclasses
    - Document (root container: relation, attributes, rows)

These objects:
    - Are plain data, no parsing logic
    - Keep row values as raw strings (typing happens in coercion)
    - Are fully serializable
"""

from abc import ABC
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Tuple


class AttributeKind(Enum):
    """
    Primitive kind every attribute maps onto.

    Nominal values are stored as their enumeration index,
    so nominal attributes report INTEGER.
    """

    NUMERIC = "numeric"
    INTEGER = "integer"
    REAL = "real"
    STRING = "string"


@dataclass(frozen=True)
class Attribute(ABC):
    """
    Base class for all attribute declarations.

    The set of subclasses is closed: NumericAttribute, IntegerAttribute,
    RealAttribute, StringAttribute, NominalAttribute, DateAttribute and the
    RelationalAttribute placeholder. Consumers dispatch on the concrete class
    and must raise on anything they do not recognize.

    Properties:
        name: Attribute name, quotes stripped
        kind: Primitive kind tag (class level)
        type_name: ARFF keyword for the type (class level)
    """

    name: str
    kind: ClassVar[AttributeKind]
    type_name: ClassVar[str]


@dataclass(frozen=True)
class NumericAttribute(Attribute):
    kind: ClassVar[AttributeKind] = AttributeKind.NUMERIC
    type_name: ClassVar[str] = "numeric"


@dataclass(frozen=True)
class IntegerAttribute(Attribute):
    kind: ClassVar[AttributeKind] = AttributeKind.INTEGER
    type_name: ClassVar[str] = "integer"


@dataclass(frozen=True)
class RealAttribute(Attribute):
    kind: ClassVar[AttributeKind] = AttributeKind.REAL
    type_name: ClassVar[str] = "real"


@dataclass(frozen=True)
class StringAttribute(Attribute):
    kind: ClassVar[AttributeKind] = AttributeKind.STRING
    type_name: ClassVar[str] = "string"


@dataclass(frozen=True)
class NominalAttribute(Attribute):
    """
    Attribute restricted to an enumerated set of literals.

    Example:
        @ATTRIBUTE outlook {sunny, overcast, rainy}

    Becomes:
        NominalAttribute(name="outlook", values=("sunny", "overcast", "rainy"))

    with enumeration {"sunny": 0, "overcast": 1, "rainy": 2}.

    Properties:
        values: Literals in declaration order, trimmed and unquoted
        enumeration: Literal -> index, index equals declaration position

    IMPORTANT:
        The tuple is the source of truth for ordering; the lookup
        table is derived from it, so equal declarations always
        produce equal indices.
    """

    values: Tuple[str, ...] = ()
    kind: ClassVar[AttributeKind] = AttributeKind.INTEGER
    type_name: ClassVar[str] = "nominal"
    _lookup: Dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False, default_factory=dict
    )

    def __post_init__(self):
        object.__setattr__(self, "values", tuple(self.values))
        lookup = {}
        for index, value in enumerate(self.values):
            if value in lookup:
                raise ValueError(f"Duplicate nominal value {value!r} in attribute {self.name!r}")
            lookup[value] = index
        object.__setattr__(self, "_lookup", lookup)

    @property
    def enumeration(self) -> Dict[str, int]:
        return dict(self._lookup)

    def index_of(self, value: str) -> Optional[int]:
        """
        Index of a literal, or None if it was not declared.

        Args:
            value: Literal as stored (no surrounding quotes)
        """
        return self._lookup.get(value)


@dataclass(frozen=True)
class DateAttribute(Attribute):
    """
    Date attribute with an optional SimpleDateFormat pattern.

    Properties:
        date_format: Pattern string, "" when the declaration omits it
            (the ISO-8601 default then applies)
    """

    date_format: str = ""
    kind: ClassVar[AttributeKind] = AttributeKind.STRING
    type_name: ClassVar[str] = "date"


@dataclass(frozen=True)
class RelationalAttribute(Attribute):
    """
    Placeholder for a relational (nested) attribute.

    Only produced when the reader runs with relational="placeholder".
    It occupies the column position but carries no schema.
    """

    kind: ClassVar[AttributeKind] = AttributeKind.STRING
    type_name: ClassVar[str] = "relational"


@dataclass
class Document:
    """
    Root container for one parsed ARFF document.

    Properties:
        relation:
            Relation name, quotes stripped
        attributes:
            Declared attributes in declaration order.
            This order is the positional schema of every row.
        rows:
            Data rows in file order. Each row holds exactly
            len(attributes) raw string values.

    INVARIANTS (enforced by the reader, not by this class):
        - The relation is declared exactly once
        - Every row's length equals len(attributes)
    """

    relation: str = ""
    attributes: List[Attribute] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    @property
    def attribute_names(self) -> List[str]:
        return [attr.name for attr in self.attributes]

    def get_attribute(self, name: str) -> Optional[Attribute]:
        """
        Retrieve an attribute by name.

        Args:
            name: Attribute name

        Returns:
            First attribute declared with that name, or None
        """
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def attribute_index(self, name: str) -> Optional[int]:
        for index, attr in enumerate(self.attributes):
            if attr.name == name:
                return index
        return None

    def column(self, name: str) -> List[str]:
        """
        Raw values of one column.

        Raises:
            KeyError: If no attribute has that name
        """
        index = self.attribute_index(name)
        if index is None:
            raise KeyError(name)
        return [row[index] for row in self.rows]


__all__ = [
    "AttributeKind",
    "Attribute",
    "NumericAttribute",
    "IntegerAttribute",
    "RealAttribute",
    "StringAttribute",
    "NominalAttribute",
    "DateAttribute",
    "RelationalAttribute",
    "Document",
]
