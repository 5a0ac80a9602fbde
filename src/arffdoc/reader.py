"""
ARFF Document Reader (Raw Text → Document).

Reads an ARFF stream in two phases:

    Header phase:
        @RELATION <name>
        @ATTRIBUTE <name> <type> [format]     (repeated)
        @DATA
    Data phase:
        v1,v2,...,vn                          (one row per line)

Header lines are tokenized with arffdoc.tokenizer (quote aware); data
lines are split on ',' with no quote handling. Tag keywords are
case-insensitive. The first violation aborts the whole parse.
"""

import logging
import warnings
from io import StringIO
from typing import Iterable, Iterator, Optional, Tuple, Union

from arffdoc.attribute_grammar import parse_attribute
from arffdoc.config import ReaderOptions
from arffdoc.errors import (
    ARFFParseError,
    ARFFReadError,
    InvalidAttributeError,
    UnsupportedFeatureError,
)
from arffdoc.model import Document, RelationalAttribute
from arffdoc.tokenizer import split


logger = logging.getLogger(__name__)

RELATION_TAG = "@RELATION"
ATTRIBUTE_TAG = "@ATTRIBUTE"
DATA_TAG = "@DATA"

Line = Union[str, bytes]


def _numbered_lines(stream: Iterable[Line], encoding: str) -> Iterator[Tuple[int, str]]:
    """Yield (line_number, text) with the line terminator removed."""
    line_number = 0
    iterator = iter(stream)
    while True:
        try:
            raw = next(iterator)
        except StopIteration:
            return
        except UnicodeDecodeError as e:
            raise ARFFReadError(f"Cannot decode line {line_number + 1}: {e}") from e
        except (OSError, ValueError) as e:
            raise ARFFReadError(f"Cannot read line {line_number + 1}: {e}") from e
        line_number += 1
        if isinstance(raw, bytes):
            try:
                raw = raw.decode(encoding)
            except UnicodeDecodeError as e:
                raise ARFFReadError(f"Cannot decode line {line_number} as {encoding}: {e}") from e
        yield line_number, raw.rstrip("\r\n")


def _parse_header(lines: Iterator[Tuple[int, str]], document: Document, options: ReaderOptions) -> None:
    """Consume header lines up to and including @DATA."""
    relation_seen = False
    for line_number, line in lines:
        if not line.lstrip().startswith("@"):
            continue

        fields = split(line)
        tag = fields[0].upper()

        if tag == RELATION_TAG:
            if relation_seen:
                raise ARFFParseError(
                    "Relation declared more than once", line_number, line, section="relation"
                )
            if len(fields) != 2:
                raise ARFFParseError(
                    f"@RELATION takes exactly one name, got {len(fields) - 1}",
                    line_number, line, section="relation",
                )
            document.relation = fields[1]
            relation_seen = True
            logger.debug("Relation %r declared on line %d", document.relation, line_number)

        elif tag == ATTRIBUTE_TAG:
            try:
                attribute = parse_attribute(fields)
            except InvalidAttributeError as e:
                raise e.at(line_number, line)
            except UnsupportedFeatureError as e:
                if options.relational == "error":
                    raise UnsupportedFeatureError(e.feature, line_number) from e
                warnings.warn(
                    f"line {line_number}: {e.feature} kept as an empty placeholder",
                    UserWarning,
                )
                attribute = RelationalAttribute(name=fields[1])
            document.attributes.append(attribute)

        elif tag == DATA_TAG:
            if len(fields) != 1:
                raise ARFFParseError(
                    "@DATA takes no arguments", line_number, line, section="data"
                )
            if not relation_seen:
                raise ARFFParseError(
                    "@DATA reached before any @RELATION", line_number, line, section="relation"
                )
            logger.debug(
                "Header complete on line %d: %d attributes", line_number, len(document.attributes)
            )
            return

        else:
            raise ARFFParseError(
                f"Unrecognized tag {fields[0]!r}", line_number, line, section="attribute"
            )

    raise ARFFParseError("Missing @DATA section", section="data")


def _parse_data(lines: Iterator[Tuple[int, str]], document: Document, options: ReaderOptions) -> None:
    width = len(document.attributes)
    for line_number, line in lines:
        if options.skip_blank_lines and (
            not line.strip() or line.startswith(options.comment_prefix)
        ):
            continue

        values = line.split(",")
        if len(values) != width:
            raise ARFFParseError(
                f"Expected {width} values, got {len(values)}",
                line_number, line, section="instance",
            )
        document.rows.append(values)


def read_arff(stream: Iterable[Line], options: Optional[ReaderOptions] = None) -> Document:
    """
    Parse an ARFF document from a stream of lines.

    Args:
        stream: Any iterable of lines (text file, binary file, list of str)
        options: Reader options (defaults to ReaderOptions())

    Returns:
        The parsed Document

    Raises:
        ARFFParseError: On the first structural violation
        UnsupportedFeatureError: For relational attributes in "error" mode
        ARFFReadError: If the stream fails or cannot be decoded
    """
    if options is None:
        options = ReaderOptions()

    document = Document()
    lines = _numbered_lines(stream, options.encoding)
    _parse_header(lines, document, options)
    _parse_data(lines, document, options)

    logger.debug("Read %d rows for relation %r", len(document.rows), document.relation)
    return document


def parse_arff_string(content: str, options: Optional[ReaderOptions] = None) -> Document:
    """Parse ARFF text held in memory."""
    return read_arff(StringIO(content), options)


def parse_arff_file(filepath: str, options: Optional[ReaderOptions] = None) -> Document:
    """
    Parse an ARFF file.

    Args:
        filepath: Path to the .arff file
        options: Reader options

    Returns:
        Document

    Raises:
        FileNotFoundError: If the file doesn't exist
        ARFFError: If reading or parsing fails
    """
    if options is None:
        options = ReaderOptions()

    try:
        f = open(filepath, "r", encoding=options.encoding, newline="")
    except FileNotFoundError:
        raise FileNotFoundError(f"ARFF file not found: {filepath}")

    with f:
        document = read_arff(f, options)

    logger.info(
        "Parsed %s: relation=%r attributes=%d rows=%d",
        filepath, document.relation, len(document.attributes), len(document.rows),
    )
    return document


__all__ = [
    "read_arff",
    "parse_arff_string",
    "parse_arff_file",
    "RELATION_TAG",
    "ATTRIBUTE_TAG",
    "DATA_TAG",
]
