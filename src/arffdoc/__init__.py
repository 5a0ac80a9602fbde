"""
arffdoc: ARFF (Attribute-Relation File Format) document reader.

Parses the header (@RELATION, @ATTRIBUTE, @DATA) and the dense data
section of an ARFF file into a Document. Row values are kept as raw
strings; arffdoc.coercion converts them per attribute when needed.
"""

from arffdoc.config import ReaderOptions
from arffdoc.errors import (
    ARFFError,
    ARFFParseError,
    ARFFReadError,
    CoercionError,
    InvalidAttributeError,
    UnsupportedFeatureError,
)
from arffdoc.model import (
    Attribute,
    AttributeKind,
    DateAttribute,
    Document,
    IntegerAttribute,
    NominalAttribute,
    NumericAttribute,
    RealAttribute,
    RelationalAttribute,
    StringAttribute,
)
from arffdoc.reader import parse_arff_file, parse_arff_string, read_arff

__version__ = "0.1.0"

__all__ = [
    "ReaderOptions",
    "ARFFError",
    "ARFFParseError",
    "ARFFReadError",
    "CoercionError",
    "InvalidAttributeError",
    "UnsupportedFeatureError",
    "Attribute",
    "AttributeKind",
    "DateAttribute",
    "Document",
    "IntegerAttribute",
    "NominalAttribute",
    "NumericAttribute",
    "RealAttribute",
    "RelationalAttribute",
    "StringAttribute",
    "parse_arff_file",
    "parse_arff_string",
    "read_arff",
]
