"""
Command line entry point.

    arffdoc weather.arff                  # summary report
    arffdoc weather.arff --format json    # document as JSON
    arffdoc weather.arff --format csv     # data as CSV
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from arffdoc.analyzer import DocumentReport, analyze_document
from arffdoc.backends import generate_arff, generate_csv
from arffdoc.config import ReaderOptions, load_options
from arffdoc.errors import ARFFError
from arffdoc.reader import parse_arff_file
from arffdoc.serialization import document_to_json, document_to_yaml


FORMATS = ("summary", "json", "yaml", "csv", "arff")


def format_summary(report: DocumentReport) -> str:
    lines = [
        f"Relation:   {report.relation}",
        f"Attributes: {report.total_attributes}",
        f"Rows:       {report.total_rows}",
        "",
    ]
    for column in report.columns:
        line = f"  {column.name} ({column.type_name}): {column.distinct_values} distinct"
        if column.mean is not None:
            line += f", min={column.minimum:g} max={column.maximum:g} mean={column.mean:.2f}"
        if column.value_counts:
            counts = ", ".join(f"{v}={n}" for v, n in column.value_counts.items())
            line += f" [{counts}]"
        lines.append(line)

    if report.warnings:
        lines.append("")
        lines.append(f"Warnings ({len(report.warnings)}):")
        for warning in report.warnings:
            lines.append(f"  - {warning}")
    return "\n".join(lines) + "\n"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arffdoc", description="Read and convert ARFF files")
    parser.add_argument("arff_file", help="Path to the .arff file")
    parser.add_argument("--format", choices=FORMATS, default="summary", help="Output format")
    parser.add_argument("--config", help="YAML file with reader options")
    parser.add_argument("--encoding", help="Input encoding (overrides the config file)")
    parser.add_argument(
        "--allow-relational",
        action="store_true",
        help="Keep relational attributes as empty placeholders instead of failing",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.config) if args.config else ReaderOptions()
        if args.encoding:
            options = dataclasses.replace(options, encoding=args.encoding)
        if args.allow_relational:
            options = dataclasses.replace(options, relational="placeholder")

        document = parse_arff_file(args.arff_file, options)

        if args.format == "json":
            output = document_to_json(document) + "\n"
        elif args.format == "yaml":
            output = document_to_yaml(document)
        elif args.format == "csv":
            output = generate_csv(document)
        elif args.format == "arff":
            output = generate_arff(document)
        else:
            output = format_summary(analyze_document(document))
    except (ARFFError, OSError, ValueError) as e:
        print(f"arffdoc: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
