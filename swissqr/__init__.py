"""
Swiss QR-bill references and billing information.

Validates ESR (QRR) and ISO 11649 (SCOR) payment references and reads,
builds and lays out Swico S1 structured billing information.

Usage:
    from swissqr import BillingInfos, Esr, Iso11649

    esr = Esr.try_without_checksum("24075237")
    scor = Iso11649.new("Invoice 2024-17").with_checksum()
    infos = BillingInfos.from_str("Thanks!//S1/10/10201409/11/190512/40/0:30")
"""

from .billing_infos import BillingInfos, Paragraph
from .billing_infos.swico import S1Builder, StructuredSet, Swico, SwicoComponent
from .config import Config, cfg, configure_logging
from .errors import (
    BillingInfoError,
    ChecksumError,
    ConditionsFormatError,
    DateFormatError,
    DecimalSeparatorError,
    EscapeError,
    FormatError,
    IbanError,
    InvalidCharactersError,
    LengthError,
    NotSwicoError,
    NumberFormatError,
    ReferenceMismatchError,
    ReferenceNumberError,
    SwicoError,
    SwicoParseError,
    SwicoSyntaxError,
    SwissQRError,
    TooLongError,
    UnknownBeaconError,
    VatNumFormatError,
)
from .esr import Esr, checksum
from .iso11649 import Iso11649, UncheckedIso11649
from .references import IbanType, Reference, ReferenceType, check_reference, iban_kind

__all__ = [
    # References
    "Esr",
    "checksum",
    "Iso11649",
    "UncheckedIso11649",
    "Reference",
    "ReferenceType",
    "IbanType",
    "iban_kind",
    "check_reference",
    # Billing information
    "BillingInfos",
    "Paragraph",
    "S1Builder",
    "StructuredSet",
    "Swico",
    "SwicoComponent",
    # Config
    "Config",
    "cfg",
    "configure_logging",
    # Errors
    "SwissQRError",
    "ReferenceNumberError",
    "LengthError",
    "FormatError",
    "InvalidCharactersError",
    "ChecksumError",
    "IbanError",
    "ReferenceMismatchError",
    "BillingInfoError",
    "NotSwicoError",
    "SwicoError",
    "TooLongError",
    "SwicoParseError",
    "UnknownBeaconError",
    "SwicoSyntaxError",
    "DateFormatError",
    "VatNumFormatError",
    "EscapeError",
    "DecimalSeparatorError",
    "NumberFormatError",
    "ConditionsFormatError",
]
