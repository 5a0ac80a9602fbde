"""Reader configuration."""

import codecs
from dataclasses import dataclass, fields
from typing import Any, Dict

import yaml


RELATIONAL_MODES = ("error", "placeholder")


@dataclass
class ReaderOptions:
    """Options controlling how a document is read.

    Attributes:
        encoding: Codec for files and for streams that yield bytes
        relational: "error" rejects relational attributes with
            UnsupportedFeatureError; "placeholder" keeps a
            RelationalAttribute in their column position
        skip_blank_lines: Ignore blank and comment lines in the data section
        comment_prefix: Lines starting with this are comments
    """
    encoding: str = "utf-8"
    relational: str = "error"
    skip_blank_lines: bool = True
    comment_prefix: str = "%"

    def __post_init__(self):
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ValueError(f"Unknown encoding {self.encoding!r}")
        if self.relational not in RELATIONAL_MODES:
            raise ValueError(
                f"relational must be one of {RELATIONAL_MODES}, got {self.relational!r}"
            )
        if not self.comment_prefix:
            raise ValueError("comment_prefix must not be empty")
        if self.comment_prefix.startswith("@"):
            raise ValueError("comment_prefix must not start with '@'")


def options_from_dict(d: Dict[str, Any]) -> ReaderOptions:
    known = {f.name for f in fields(ReaderOptions)}
    unknown = set(d) - known
    if unknown:
        raise ValueError(f"Unknown reader options: {sorted(unknown)}")
    return ReaderOptions(**d)


def load_options(path: str) -> ReaderOptions:
    """Load ReaderOptions from a YAML mapping; an empty file gives the defaults."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return ReaderOptions()
    if not isinstance(data, dict):
        raise ValueError(f"Reader options in {path} must be a mapping")
    return options_from_dict(data)


__all__ = ["ReaderOptions", "RELATIONAL_MODES", "options_from_dict", "load_options"]
