"""Billing information: free text message and structured emitter data.

The QR payload carries both in one 140 character budget. Structured data
comes from an emitter; Swico S1 is the only one today.
"""

import logging

from swissqr.config import cfg
from swissqr.errors import NotSwicoError, TooLongError

from .paragraph import Paragraph, fit_width, make_paragraph
from .swico import MAX_CHARS, S1_MARKER, Swico

logger = logging.getLogger(__name__)


# New emitters are added to this union
Emitter = Swico

TRAILER = "EPD"


class BillingInfos:
    """Optional emitter plus optional free text overriding its message.

    Instances are never modified: :meth:`add_unstructured` returns a copy.

    Example:
        >>> infos = BillingInfos().add_unstructured("Invoice F248956-24RI")
        >>> infos.unstructured()
        'Invoice F248956-24RI'
    """

    __slots__ = ("_emitter", "_unstructured")

    def __init__(self, emitter: Emitter | None = None, unstructured: str | None = None):
        self._emitter = emitter
        self._unstructured = unstructured

    @staticmethod
    def swico() -> Swico:
        return Swico()

    @classmethod
    def from_str(cls, text: str) -> "BillingInfos":
        """Parse a ``message//S1/NN/value...`` string.

        Raises:
            NotSwicoError: if ``text`` has no ``//S1`` marker.
            SwicoError: if parsing, validation or the length check fails.
        """
        if S1_MARKER not in text:
            raise NotSwicoError(text)
        infos = cls(emitter=Swico.from_str(text))
        if len(infos) > MAX_CHARS:
            raise TooLongError(len(infos))
        return infos

    @property
    def emitter(self) -> Emitter | None:
        return self._emitter

    def add_unstructured(self, text: str) -> "BillingInfos":
        """Return a copy whose message is ``text``.

        Any earlier message is replaced, the emitter is kept.

        Raises:
            TooLongError: if ``text`` and the structured data exceed 140 characters.
        """
        length = len(text) + len(self.structured() or "")
        if length > MAX_CHARS:
            raise TooLongError(length)
        logger.debug(f"Message replaced, billing information now {length} chars")
        return BillingInfos(emitter=self._emitter, unstructured=text)

    def unstructured(self) -> str | None:
        """Message for the QR payload, the override winning over the emitter's."""
        if self._unstructured is not None:
            return self._unstructured
        if self._emitter is not None:
            return self._emitter.unstructured()
        return None

    def structured(self) -> str | None:
        """Structured data for the QR payload, in canonical field order."""
        if self._emitter is None:
            return None
        fields = self._emitter.structured_fields()
        return "".join(fields) if fields else None

    def as_paragraph(self, max_width: int | None = None) -> Paragraph | None:
        """Lines to print on the bill, message first.

        With ``max_width`` every line wider than it is wrapped.
        """
        paragraph = make_paragraph(self.unstructured(), self.structured())
        if paragraph is not None and max_width is not None:
            paragraph = fit_width(paragraph, max_width)
        return paragraph

    def display_lines(self, section: str = "payment") -> Paragraph:
        """Paragraph fitted to the configured width of a bill section."""
        widths = cfg.get_line_widths()
        if section not in widths:
            raise ValueError(f"Unknown bill section: {section!r}")
        return self.as_paragraph(max_width=widths[section]) or []

    def qr_data_fields(self) -> list[str]:
        """Message, trailer and structured data lines of the QR payload."""
        return [self.unstructured() or "", TRAILER, self.structured() or ""]

    def __len__(self) -> int:
        return len(self.unstructured() or "") + len(self.structured() or "")

    def is_empty(self) -> bool:
        return len(self) == 0

    def __repr__(self) -> str:
        return f"BillingInfos(emitter={self._emitter!r}, unstructured={self._unstructured!r})"


__all__ = ["BillingInfos", "Emitter", "Paragraph", "TRAILER"]
