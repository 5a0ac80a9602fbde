"""
Exception taxonomy for ARFF reading.

Three families of failure are kept apart so callers can react to each:
    - ARFFReadError: the stream itself could not be read or decoded
    - ARFFParseError: the text violates the ARFF structure
    - UnsupportedFeatureError: well-formed, but not something we implement

All of them derive from ARFFError.
"""

from typing import Optional


ARFF_REFERENCE = "https://waikato.github.io/weka-wiki/formats_and_processing/arff_stable/"

GRAMMAR_SECTIONS = {
    "relation": "The @relation Declaration",
    "attribute": "The @attribute Declarations",
    "data": "The @data Declaration",
    "instance": "The instance data",
}


class ARFFError(Exception):
    """Base class for every error raised by arffdoc."""
    pass


class ARFFReadError(ARFFError):
    """Raised when the input stream cannot be read or decoded."""
    pass


class ARFFParseError(ARFFError):
    """
    Raised when a document violates the ARFF structure.

    Properties:
        message: What went wrong
        line_number: 1-based line of the offending text (None if unknown)
        line: The offending line, terminator stripped (None if unknown)
        section: Grammar section the rule belongs to
            (relation, attribute, data or instance)
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        line: Optional[str] = None,
        section: Optional[str] = None,
    ):
        self.message = message
        self.line_number = line_number
        self.line = line
        self.section = section
        super().__init__(self._render())

    @property
    def reference(self) -> Optional[str]:
        """Pointer into the ARFF documentation for the violated section."""
        if self.section is None:
            return None
        return f"{ARFF_REFERENCE} ({GRAMMAR_SECTIONS[self.section]})"

    def at(self, line_number: int, line: str) -> "ARFFParseError":
        """Attach the location of the offending line and return self."""
        self.line_number = line_number
        self.line = line
        self.args = (self._render(),)
        return self

    def _render(self) -> str:
        parts = []
        if self.line_number is not None:
            parts.append(f"line {self.line_number}: ")
        parts.append(self.message)
        if self.line is not None:
            parts.append(f" [{self.line!r}]")
        if self.section is not None:
            parts.append(f"; see {self.reference}")
        return "".join(parts)


class InvalidAttributeError(ARFFParseError):
    """Raised for a malformed @ATTRIBUTE declaration."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message, line_number=line_number, line=line, section="attribute")


class UnsupportedFeatureError(ARFFError):
    """
    Raised for declarations that are well-formed but not implemented.

    Deliberately not an ARFFParseError: the input is not malformed,
    so callers may choose to skip rather than reject it.
    """

    def __init__(self, feature: str, line_number: Optional[int] = None):
        self.feature = feature
        self.line_number = line_number
        prefix = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{prefix}{feature} is not supported")


class CoercionError(ARFFError, ValueError):
    """Raised when a raw value cannot be converted to its attribute's type."""
    pass


__all__ = [
    "ARFF_REFERENCE",
    "GRAMMAR_SECTIONS",
    "ARFFError",
    "ARFFReadError",
    "ARFFParseError",
    "InvalidAttributeError",
    "UnsupportedFeatureError",
    "CoercionError",
]
