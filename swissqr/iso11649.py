"""ISO 11649 creditor references (SCOR).

A creditor reference is ``RF`` followed by two check digits and up to 21
alphanumeric characters. The check digits follow ISO 7064 MOD 97-10: with
the first four characters moved to the end and every letter replaced by
its base 36 value, the resulting number must leave a remainder of 1 when
divided by 97.
"""

import logging
import re
import unicodedata

from stdnum.iso7064 import mod_97_10

from swissqr.errors import ChecksumError, FormatError, InvalidCharactersError, LengthError

logger = logging.getLogger(__name__)


PREFIX = "RF"
MIN_LENGTH = 5
MAX_LENGTH = 25
MAX_BODY_LENGTH = 21

# Separators people type into references and that carry no meaning
_SEPARATORS = re.compile(r"[ \-.,/:]")
_BASE36 = re.compile(r"[^0-9A-Z]")


def _fold_to_ascii(text: str) -> str:
    """Drop diacritics so that 'Dépôt' becomes 'Depot'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if unicodedata.category(char) != "Mn")


def _rearranged(number: str) -> str:
    return number[4:] + number[:4]


class Iso11649:
    """A validated ISO 11649 creditor reference.

    ``Iso11649(number)`` validates an existing reference (strict mode).
    ``Iso11649.new(text).with_checksum()`` turns arbitrary text into a
    reference and never fails (generative mode).
    """

    __slots__ = ("_number",)

    def __init__(self, number: str):
        number = _SEPARATORS.sub("", number)
        if len(number) < MIN_LENGTH or len(number) > MAX_LENGTH:
            raise LengthError(
                number, f"Length must be between {MIN_LENGTH} and {MAX_LENGTH}, found {len(number)}"
            )
        if not number.startswith(PREFIX):
            raise FormatError(number, "Number must start with 'RF'")
        if not (number.isascii() and number.isalnum()):
            raise InvalidCharactersError(number)
        if not mod_97_10.is_valid(_rearranged(number)):
            raise ChecksumError(number)
        self._number = number

    @classmethod
    def try_new(cls, number: str) -> "Iso11649":
        return cls(number)

    @classmethod
    def new(cls, text: str) -> "UncheckedIso11649":
        """Start a generative reference from arbitrary text.

        Text without any letter or digit left after folding yields the bare
        four character reference ``RF04``, which strict mode rejects as too
        short.
        """
        return UncheckedIso11649(text)

    @classmethod
    def _trusted(cls, number: str) -> "Iso11649":
        reference = object.__new__(cls)
        reference._number = number
        return reference

    def to_raw(self) -> str:
        return self._number

    def __str__(self) -> str:
        return " ".join(self._number[i:i + 4] for i in range(0, len(self._number), 4))

    def __repr__(self) -> str:
        return f"Iso11649({self._number!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Iso11649):
            return NotImplemented
        return self._number == other._number

    def __hash__(self) -> int:
        return hash(self._number)


class UncheckedIso11649:
    """Body of a creditor reference waiting for its check digits."""

    __slots__ = ("body",)

    def __init__(self, text: str):
        body = _fold_to_ascii(text).upper().replace(" ", "")
        self.body = _BASE36.sub("", body)[:MAX_BODY_LENGTH]

    def with_checksum(self) -> Iso11649:
        remainder = mod_97_10.checksum(self.body + PREFIX + "00")
        number = f"{PREFIX}{98 - remainder:02d}{self.body}"
        logger.debug(f"Generated creditor reference {number}")
        return Iso11649._trusted(number)
