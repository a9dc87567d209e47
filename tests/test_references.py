"""Tests for payment references and account compatibility."""

import pytest

from swissqr.errors import IbanError, ReferenceMismatchError
from swissqr.esr import Esr
from swissqr.iso11649 import Iso11649
from swissqr.references import (
    IbanType,
    Reference,
    ReferenceType,
    check_reference,
    iban_kind,
)


QRIID_IBAN = "CH44 3199 9123 0008 8901 2"
IID_IBAN = "CH5800791123000889012"


@pytest.fixture
def qrr():
    return Reference.qrr(Esr.try_with_checksum("240752772"))


@pytest.fixture
def scor():
    return Reference.scor(Iso11649("RF18 5390 0754 7034"))


# ============================================================================
# Reference Tests
# ============================================================================


class TestReference:
    """Tests for the reference union."""

    def test_qrr_data_list(self, qrr):
        assert qrr.kind == ReferenceType.QRR
        assert qrr.data_list() == ["QRR", "240752772"]

    def test_scor_data_list(self, scor):
        assert scor.data_list() == ["SCOR", "RF18539007547034"]

    def test_none_data_list(self):
        assert Reference.none().data_list() == ["NON", ""]
        assert str(Reference.none()) == ""

    def test_display_delegates(self, qrr, scor):
        assert str(qrr) == "00 00000 00000 00000 02407 52772"
        assert str(scor) == "RF18 5390 0754 7034"

    def test_mismatched_number_type(self):
        with pytest.raises(TypeError):
            Reference(ReferenceType.QRR, Iso11649("RF25A"))


# ============================================================================
# IBAN Tests
# ============================================================================


class TestIbanKind:
    """Tests for QR-IID detection."""

    def test_qr_iid(self):
        assert iban_kind(QRIID_IBAN) == IbanType.QRIID

    def test_regular_iid(self):
        assert iban_kind(IID_IBAN) == IbanType.IID

    def test_invalid_check_digits(self):
        with pytest.raises(IbanError):
            iban_kind("CH44 3199 9123 0008 8901 3")

    def test_foreign_country(self):
        with pytest.raises(IbanError):
            iban_kind("DE89 3704 0044 0532 0130 00")


class TestCheckReference:
    """Tests for reference/account compatibility."""

    def test_qr_iid_accepts_qrr(self, qrr):
        assert check_reference(QRIID_IBAN, qrr) is qrr

    def test_qr_iid_rejects_scor(self, scor):
        with pytest.raises(ReferenceMismatchError):
            check_reference(QRIID_IBAN, scor)

    def test_qr_iid_rejects_none(self):
        with pytest.raises(ReferenceMismatchError):
            check_reference(QRIID_IBAN, Reference.none())

    def test_iid_rejects_qrr(self, qrr):
        with pytest.raises(ReferenceMismatchError):
            check_reference(IID_IBAN, qrr)

    @pytest.mark.parametrize("factory", ["scor", "none"])
    def test_iid_accepts_others(self, factory, scor):
        reference = scor if factory == "scor" else Reference.none()
        assert check_reference(IID_IBAN, reference) is reference
