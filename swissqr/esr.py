"""ESR / QRR reference numbers.

A QR reference is a purely numeric string of at most 27 digits whose last
digit is a recursive modulo 10 check digit (the "Modulo 10 recursive"
substitution table from the ESR handbook).
"""

import logging

from stdnum.ch import esr as stdnum_esr

from swissqr.errors import ChecksumError, FormatError, LengthError

logger = logging.getLogger(__name__)


MIN_LENGTH = 5
MAX_LENGTH = 27  # including the check digit
DISPLAY_LENGTH = 27


def _clean(number: str) -> str:
    return number.replace(" ", "").lstrip("0")


def _is_digits(number: str) -> bool:
    return number.isascii() and number.isdigit()


def checksum(number: str) -> str:
    """Compute the check digit of a string of digits.

    Raises:
        FormatError: if ``number`` contains anything but ASCII digits.
    """
    if not _is_digits(number):
        raise FormatError(number, "ESR requires only digits")
    return stdnum_esr.calc_check_digit(number)


class Esr:
    """A validated ESR (QRR) reference number.

    Use :meth:`try_with_checksum` for numbers that already carry their
    check digit and :meth:`try_without_checksum` to have it appended.
    """

    __slots__ = ("_number",)

    def __init__(self, number: str):
        self._number = number

    @classmethod
    def try_with_checksum(cls, number: str) -> "Esr":
        """Validate a reference whose last digit is the check digit."""
        cleaned = _clean(number)
        if len(cleaned) > MAX_LENGTH or len(cleaned) < MIN_LENGTH:
            raise LengthError(
                number, f"ESR length must be between {MIN_LENGTH} and {MAX_LENGTH}, found {len(cleaned)}"
            )
        if not _is_digits(cleaned):
            raise FormatError(number, "ESR requires only digits")
        expected = checksum(cleaned[:-1])
        if cleaned[-1] != expected:
            raise ChecksumError(number, f"ESR checksum is invalid, expected {expected}")
        return cls(cleaned)

    @classmethod
    def try_without_checksum(cls, number: str) -> "Esr":
        """Append the check digit to ``number`` and validate the result."""
        cleaned = _clean(number)
        if len(cleaned) > MAX_LENGTH - 1 or len(cleaned) < MIN_LENGTH - 1:
            raise LengthError(
                number,
                f"ESR length without checksum must be between {MIN_LENGTH - 1} "
                f"and {MAX_LENGTH - 1}, found {len(cleaned)}",
            )
        if not _is_digits(cleaned):
            raise FormatError(number, "ESR requires only digits")
        with_checksum = cleaned + checksum(cleaned)
        logger.debug(f"Appended ESR check digit: {cleaned} -> {with_checksum}")
        return cls.try_with_checksum(with_checksum)

    def to_raw(self) -> str:
        return self._number

    def __str__(self) -> str:
        number = self._number.rjust(DISPLAY_LENGTH, "0")
        groups = [number[i:i + 5] for i in range(2, DISPLAY_LENGTH, 5)]
        return " ".join([number[:2], *groups])

    def __repr__(self) -> str:
        return f"Esr({self._number!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Esr):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash(self._number)
