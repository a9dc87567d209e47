"""Pytest configuration and shared fixtures."""

import pytest
import sys
from datetime import date
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from swissqr.billing_infos.swico import S1Builder  # noqa: E402


MESSAGE = "Paiement de septante-trois années de retard d'impôts à payer sous 10 jours"
SHORT_MESSAGE = "Paiement des impôts sous 10 jours"
CANONICAL_S1 = (
    r"//S1/10/24073428/11/240630/20/145258\/Dépôt/30/112806097/31/240501240630/40/3:10;0:30"
)


@pytest.fixture
def full_builder():
    """Builder with every field of a typical invoice, set out of order."""
    return (
        S1Builder()
        .vat_num("112806097")
        .client_ref(r"145258\/Dépôt")
        .conditions("3:10;0:30")
        .invoice_ref("24073428")
        .vat_date_from(date(2024, 5, 1), date(2024, 6, 30))
        .doc_date_from(date(2024, 6, 30))
    )


@pytest.fixture
def canonical_s1():
    return CANONICAL_S1


@pytest.fixture
def message():
    return MESSAGE


@pytest.fixture
def short_message():
    """Message short enough to fit next to the full invoice fields."""
    return SHORT_MESSAGE
