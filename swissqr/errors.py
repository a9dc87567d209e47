"""Exception hierarchy for reference numbers and billing information.

Every error keeps the offending input on ``value`` so it can be shown to
the end user as-is.
"""

from typing import Any


class SwissQRError(Exception):
    """Base class for all swissqr errors."""

    default_message = "Invalid QR-bill data"

    def __init__(self, value: Any = None, message: str | None = None):
        self.value = value
        super().__init__(message or self._format())

    def _format(self) -> str:
        if self.value is None:
            return self.default_message
        return f"{self.default_message}: {self.value!r}"


# ============================================================================
# Reference numbers
# ============================================================================


class ReferenceNumberError(SwissQRError):
    """Raised when an ESR or ISO 11649 reference cannot be built."""

    default_message = "Invalid reference number"


class LengthError(ReferenceNumberError):
    default_message = "Reference length is out of bounds"


class FormatError(ReferenceNumberError):
    default_message = "Reference has an invalid format"


class InvalidCharactersError(FormatError):
    default_message = "Reference must only contain ASCII letters and digits"


class ChecksumError(ReferenceNumberError):
    default_message = "Checksum is invalid"


class IbanError(ReferenceNumberError):
    default_message = "IBAN must be a valid CH or LI account"


class ReferenceMismatchError(IbanError):
    """Raised when a reference type does not fit the account's IID."""

    default_message = "Reference type is not compatible with the IBAN"


# ============================================================================
# Billing information / Swico
# ============================================================================


class BillingInfoError(SwissQRError):
    default_message = "Invalid billing information"


class NotSwicoError(BillingInfoError):
    default_message = "Could not parse string into Swico, missing '//S1'"


class SwicoError(BillingInfoError):
    default_message = "Invalid Swico data"


class TooLongError(SwicoError):
    """Combined unstructured and structured text exceeds the 140 char cap."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            length,
            f"Maximum 140 characters authorized for billing information, found: {length}",
        )


class SwicoParseError(SwicoError):
    default_message = "Could not parse Swico string"


class UnknownBeaconError(SwicoParseError):
    default_message = "Invalid Swico beacon/group"


class SwicoSyntaxError(SwicoError):
    default_message = "Could not validate Swico syntax"


class DateFormatError(SwicoSyntaxError):
    default_message = "Invalid date format, expected YYMMDD or YYMMDDYYMMDD"


class VatNumFormatError(SwicoSyntaxError):
    default_message = "VAT number must be 9 digits"


class EscapeError(SwicoSyntaxError):
    default_message = r"Invalid escape char, '\' and '/' must be written '\\' or '\/'"


class DecimalSeparatorError(SwicoSyntaxError):
    default_message = "Amounts and percentages must use '.' as decimal separator"


class NumberFormatError(SwicoSyntaxError):
    default_message = "Expected a number"


class ConditionsFormatError(SwicoSyntaxError):
    default_message = "Conditions must be 'discount:days' groups"
