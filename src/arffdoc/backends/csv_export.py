"""
CSV export for arffdoc documents.

Writes one header row of attribute names followed by the raw row values.
"""

import csv
from io import StringIO

from arffdoc.model import Document


def generate_csv(document: Document) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(document.attribute_names)
    writer.writerows(document.rows)
    return buffer.getvalue()


def save_csv_file(document: Document, filename: str) -> None:
    with open(filename, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(document.attribute_names)
        writer.writerows(document.rows)


__all__ = ["generate_csv", "save_csv_file"]
