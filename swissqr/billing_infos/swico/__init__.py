"""Swico structured billing information (S1 syntax).

FRENCH: https://www.swiss-qr-invoice.org/downloads/qr-bill-s1-syntax-fr.pdf
GERMAN: https://www.swiss-qr-invoice.org/downloads/qr-bill-s1-syntax-de.pdf
"""

from .builder import MAX_CHARS, S1Builder
from .components import StructuredSet, SwicoComponent
from .parser import S1_MARKER, s1_parser
from .syntax import DATE_FMT, Version, validate_syntax


class Swico:
    """Swico emitter holding one validated field set."""

    __slots__ = ("version", "_fields")

    def __init__(self, version: Version | None = None, fields: StructuredSet | None = None):
        self.version = version
        self._fields = fields.copy() if fields is not None else None

    @classmethod
    def from_str(cls, text: str) -> "Swico":
        """Parse and validate a ``message//S1/NN/value...`` string."""
        fields = validate_syntax(s1_parser(text), Version.S1)
        return cls(Version.S1, fields)

    def s1_builder(self) -> S1Builder:
        return S1Builder()

    def s2_builder(self):
        raise NotImplementedError("Swico S2 syntax is not published yet")

    @property
    def fields(self) -> StructuredSet | None:
        return self._fields.copy() if self._fields is not None else None

    def unstructured(self) -> str | None:
        if self._fields is None:
            return None
        return self._fields.unstructured()

    def structured_fields(self) -> list[str]:
        if self._fields is None:
            return []
        return self._fields.structured_fields()

    def __repr__(self) -> str:
        return f"Swico(version={self.version!r}, fields={self._fields!r})"


__all__ = [
    "DATE_FMT",
    "MAX_CHARS",
    "S1_MARKER",
    "S1Builder",
    "StructuredSet",
    "Swico",
    "SwicoComponent",
    "Version",
    "s1_parser",
    "validate_syntax",
]
