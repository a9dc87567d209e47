"""Fluent builder for Swico S1 billing information."""

import logging
from datetime import date

from swissqr.billing_infos.swico.components import StructuredSet, SwicoComponent
from swissqr.billing_infos.swico.syntax import DATE_FMT, Version, validate_syntax
from swissqr.errors import TooLongError

logger = logging.getLogger(__name__)


MAX_CHARS = 140


class S1Builder:
    """Collect Swico S1 fields one call at a time.

    Every setter returns the builder so calls can be chained. Setting the
    same field twice keeps the last value.

    Example:
        infos = (
            S1Builder()
            .invoice_ref("10201409")
            .doc_date_from(date(2019, 5, 12))
            .conditions("2:10;0:30")
            .build()
        )
    """

    def __init__(self):
        self._fields = StructuredSet()

    def _set(self, component: SwicoComponent, text: str) -> "S1Builder":
        self._fields[component] = text
        return self

    def add_unstructured(self, text: str) -> "S1Builder":
        """Free text message placed in front of the structured data."""
        return self._set(SwicoComponent.UNSTRUCTURED, text)

    def invoice_ref(self, text: str) -> "S1Builder":
        """Voucher/invoice number (/10/).

        ``/`` and ``\\`` must be escaped as ``\\/`` and ``\\\\``.
        """
        return self._set(SwicoComponent.INVOICE_REF, text)

    def doc_date(self, text: str) -> "S1Builder":
        """Voucher date (/11/) as ``YYMMDD``.

        Both "240101" and "010124" are valid dates; prefer
        :meth:`doc_date_from` when the order is not certain.
        """
        return self._set(SwicoComponent.DOC_DATE, text)

    def doc_date_from(self, value: date) -> "S1Builder":
        return self._set(SwicoComponent.DOC_DATE, value.strftime(DATE_FMT))

    def client_ref(self, text: str) -> "S1Builder":
        """Reference sent by the customer to identify the bill (/20/)."""
        return self._set(SwicoComponent.CLIENT_REF, text)

    def vat_num(self, text: str) -> "S1Builder":
        """Numerical UID of the creditor without CHE prefix and suffix (/30/)."""
        return self._set(SwicoComponent.VAT_NUM, text)

    def vat_date(self, text: str) -> "S1Builder":
        """Date (``YYMMDD``) or period (``YYMMDDYYMMDD``) of the service (/31/)."""
        return self._set(SwicoComponent.VAT_DATE, text)

    def vat_date_from(self, start: date, end: date | None = None) -> "S1Builder":
        text = start.strftime(DATE_FMT)
        if end is not None:
            text += end.strftime(DATE_FMT)
        return self._set(SwicoComponent.VAT_DATE, text)

    def vat_details(self, text: str) -> "S1Builder":
        """Single rate or ``rate:net_amount`` list, ``;`` separated (/32/)."""
        return self._set(SwicoComponent.VAT_DETAILS, text)

    def vat_import(self, text: str) -> "S1Builder":
        """Import tax as ``rate:vat_amount`` list (/33/)."""
        return self._set(SwicoComponent.VAT_IMPORT, text)

    def conditions(self, text: str) -> "S1Builder":
        """Discounts as ``percent:days`` list (/40/).

        A zero percent entry gives the default payment term, e.g. "0:30".
        """
        return self._set(SwicoComponent.CONDITIONS, text)

    def build(self):
        """Validate the collected fields and wrap them in a BillingInfos.

        Raises:
            TooLongError: if the field values, message included, exceed 140
                characters, or if the message and the delimited structured
                text together do.
            SwicoSyntaxError: if a field breaks the S1 syntax.
        """
        from swissqr.billing_infos import BillingInfos
        from swissqr.billing_infos.swico import Swico

        fields = self._fields.copy()
        if len(fields) > 1:
            fields[SwicoComponent.PREFIX] = "S1"

        length = fields.tot_len()
        if length > MAX_CHARS:
            raise TooLongError(length)

        validate_syntax(fields, Version.S1)
        infos = BillingInfos(emitter=Swico(Version.S1, fields))
        # Delimiters count towards the payload cap
        if len(infos) > MAX_CHARS:
            raise TooLongError(len(infos))
        logger.debug(f"Built Swico S1 billing information ({len(infos)} chars)")
        return infos
