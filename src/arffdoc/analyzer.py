"""
Document Analyzer: inventory and diagnostics for parsed ARFF documents.

This module provides lightweight analysis of Document objects:
    - Attribute kind inventory
    - Per-column value statistics
    - Nominal value distribution
    - Warning flags for values the declared schema does not accept

IMPORTANT: It does NOT modify the document. It only produces read-only reports.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from arffdoc.coercion import coerce_value
from arffdoc.errors import ARFFError
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


@dataclass
class ColumnSummary:
    """Statistics about a single column."""
    name: str
    type_name: str
    distinct_values: int = 0
    invalid_values: int = 0
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    mean: Optional[float] = None
    value_counts: Dict[str, int] = field(default_factory=dict)


def _summarize_column(attribute: Attribute, raw_values: List[str]) -> ColumnSummary:
    summary = ColumnSummary(name=attribute.name, type_name=attribute.type_name)
    summary.distinct_values = len(set(raw_values))

    if isinstance(attribute, RelationalAttribute):
        return summary

    converted = []
    for raw in raw_values:
        try:
            converted.append(coerce_value(attribute, raw))
        except ARFFError:
            summary.invalid_values += 1

    if isinstance(attribute, (NumericAttribute, IntegerAttribute, RealAttribute)):
        if converted:
            summary.minimum = float(min(converted))
            summary.maximum = float(max(converted))
            summary.mean = sum(converted) / len(converted)

    elif isinstance(attribute, NominalAttribute):
        counts = Counter(converted)
        summary.value_counts = {
            value: counts.get(index, 0) for index, value in enumerate(attribute.values)
        }

    elif isinstance(attribute, (StringAttribute, DateAttribute)):
        pass

    else:
        raise TypeError(f"Unsupported Attribute type: {type(attribute)}")

    return summary


@dataclass
class DocumentReport:
    """Comprehensive analysis report for a document."""

    relation: str
    total_attributes: int = 0
    total_rows: int = 0

    # Attribute inventory
    attributes_by_type: Dict[str, int] = field(default_factory=dict)
    duplicate_attribute_names: List[str] = field(default_factory=list)

    # Column statistics
    columns: List[ColumnSummary] = field(default_factory=list)

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def get_column(self, name: str) -> Optional[ColumnSummary]:
        for column in self.columns:
            if column.name == name:
                return column
        return None


def analyze_document(document: Document) -> DocumentReport:
    """
    Perform analysis of a Document.

    Checks for:
    - Attribute kinds and repeated attribute names
    - Values that do not convert to their attribute's type
    - Nominal values outside the declared set
    - Constant columns and an empty data section

    Returns a DocumentReport with metrics and warnings.
    """
    report = DocumentReport(relation=document.relation)
    report.total_attributes = len(document.attributes)
    report.total_rows = len(document.rows)

    # Attribute inventory
    by_type = Counter(attr.type_name for attr in document.attributes)
    report.attributes_by_type = dict(by_type)

    name_counts = Counter(document.attribute_names)
    report.duplicate_attribute_names = sorted(n for n, c in name_counts.items() if c > 1)

    # Column statistics
    for index, attribute in enumerate(document.attributes):
        raw_values = [row[index] for row in document.rows]
        report.columns.append(_summarize_column(attribute, raw_values))

    # Warning flags
    if report.duplicate_attribute_names:
        report.add_warning(
            f"Duplicate attribute names: {', '.join(report.duplicate_attribute_names)}"
        )

    if by_type.get(RelationalAttribute.type_name):
        report.add_warning(
            f"Relational placeholders: {by_type[RelationalAttribute.type_name]} columns carry no schema"
        )

    if report.total_rows == 0:
        report.add_warning("Empty data section")

    for column in report.columns:
        if column.invalid_values:
            report.add_warning(
                f"Column {column.name!r}: {column.invalid_values} values do not match type {column.type_name}"
            )
        if report.total_rows > 1 and column.distinct_values == 1:
            report.add_warning(f"Column {column.name!r} is constant")

    return report


__all__ = ["ColumnSummary", "DocumentReport", "analyze_document"]
