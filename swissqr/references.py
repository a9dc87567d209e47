"""Payment references and their compatibility with the creditor account.

A QR-bill carries exactly one of three reference types. Which one is
allowed depends on the institution identifier (IID) embedded in the IBAN:
accounts with a QR-IID must use a QR reference, all others must not.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from stdnum import iban as stdnum_iban
from stdnum.exceptions import ValidationError

from swissqr.errors import IbanError, ReferenceMismatchError
from swissqr.esr import Esr
from swissqr.iso11649 import Iso11649

logger = logging.getLogger(__name__)


IBAN_ALLOWED_COUNTRIES = ("CH", "LI")
QR_IID_START = 30000
QR_IID_END = 31999


class ReferenceType(str, Enum):
    """Reference type codes as written in the QR payload."""

    QRR = "QRR"     # ESR based QR reference
    SCOR = "SCOR"   # ISO 11649 creditor reference
    NON = "NON"     # No reference


class IbanType(str, Enum):
    """Kind of account, derived from the IID."""

    QRIID = "qriid"
    IID = "iid"


@dataclass(frozen=True, slots=True)
class Reference:
    """One payment reference: QRR, SCOR or none.

    Build instances with :meth:`qrr`, :meth:`scor` or :meth:`none`.
    """

    kind: ReferenceType
    number: Esr | Iso11649 | None = None

    def __post_init__(self):
        expected = {
            ReferenceType.QRR: Esr,
            ReferenceType.SCOR: Iso11649,
            ReferenceType.NON: type(None),
        }[self.kind]
        if not isinstance(self.number, expected):
            raise TypeError(f"{self.kind.value} reference requires {expected.__name__}")

    @classmethod
    def qrr(cls, esr: Esr) -> "Reference":
        return cls(ReferenceType.QRR, esr)

    @classmethod
    def scor(cls, iso: Iso11649) -> "Reference":
        return cls(ReferenceType.SCOR, iso)

    @classmethod
    def none(cls) -> "Reference":
        return cls(ReferenceType.NON)

    def data_list(self) -> list[str]:
        """Reference type and reference lines of the QR payload."""
        if self.number is None:
            return [self.kind.value, ""]
        return [self.kind.value, self.number.to_raw()]

    def __str__(self) -> str:
        return "" if self.number is None else str(self.number)


def iban_kind(iban: str) -> IbanType:
    """Tell QR-IID accounts apart from regular IID accounts.

    Raises:
        IbanError: if the IBAN is invalid or not Swiss/Liechtenstein.
    """
    try:
        compact = stdnum_iban.validate(iban)
    except ValidationError as e:
        raise IbanError(iban, f"Invalid IBAN {iban!r}: {e}") from e
    if compact[:2] not in IBAN_ALLOWED_COUNTRIES:
        raise IbanError(iban, "The IBAN needs to start with CH or LI")
    iid = int(compact[4:9])
    if QR_IID_START <= iid <= QR_IID_END:
        return IbanType.QRIID
    return IbanType.IID


def check_reference(iban: str, reference: Reference) -> Reference:
    """Ensure ``reference`` may be used with the account ``iban``.

    Returns the reference unchanged when compatible.
    """
    kind = iban_kind(iban)
    if kind == IbanType.QRIID and reference.kind != ReferenceType.QRR:
        raise ReferenceMismatchError(
            iban, f"IBAN provided ({iban!r}) has a QR-IID and requires a QRR reference"
        )
    if kind == IbanType.IID and reference.kind == ReferenceType.QRR:
        raise ReferenceMismatchError(
            iban, f"IBAN provided ({iban!r}) has a regular IID and cannot use a QRR reference"
        )
    logger.debug(f"{reference.kind.value} reference accepted for {kind.value} account")
    return reference
