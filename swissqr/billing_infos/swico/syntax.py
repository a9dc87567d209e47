"""Field level syntax rules of Swico S1.

Validation never modifies the set: it is returned untouched on success.
"""

import logging
import re
from datetime import datetime
from enum import Enum

from swissqr.billing_infos.swico.components import StructuredSet, SwicoComponent
from swissqr.errors import (
    ConditionsFormatError,
    DateFormatError,
    DecimalSeparatorError,
    EscapeError,
    NumberFormatError,
    VatNumFormatError,
)

logger = logging.getLogger(__name__)


DATE_FMT = "%y%m%d"
DATE_LENGTH = 6
VAT_NUM_LENGTH = 9

_DIGITS = re.compile(r"[0-9]+")

ESCAPED_FIELDS = (SwicoComponent.INVOICE_REF, SwicoComponent.CLIENT_REF)
DATE_FIELDS = (SwicoComponent.DOC_DATE, SwicoComponent.VAT_DATE)
GROUP_FIELDS = (
    SwicoComponent.VAT_DETAILS,
    SwicoComponent.VAT_IMPORT,
    SwicoComponent.CONDITIONS,
)


class Version(str, Enum):
    """Swico syntax versions."""

    S1 = "S1"
    # S2 is announced but not specified yet


def validate_syntax(structured_set: StructuredSet, version: Version = Version.S1) -> StructuredSet:
    """Check every present field against the rules of ``version``.

    Raises:
        SwicoSyntaxError: subclass naming the first rule that failed.
    """
    if version is not Version.S1:
        raise NotImplementedError(f"Swico {version.value} syntax is not supported")

    for component in DATE_FIELDS:
        if (value := structured_set.get(component)) is not None:
            check_date(value)

    if (vat_num := structured_set.get(SwicoComponent.VAT_NUM)) is not None:
        check_vat_num(vat_num)

    for component in ESCAPED_FIELDS:
        if (value := structured_set.get(component)) is not None:
            check_escaping(value)

    for component in GROUP_FIELDS:
        if (value := structured_set.get(component)) is not None:
            if "," in value:
                raise DecimalSeparatorError(
                    value,
                    "An amount or a percentage with decimal places must use '.' "
                    f"(full stop) as the separator, found: {value!r}",
                )
            check_groups(value, is_condition=component is SwicoComponent.CONDITIONS)

    logger.debug(f"Swico {version.value} syntax valid for {len(structured_set)} fields")
    return structured_set


def check_date(value: str) -> None:
    """A date is ``YYMMDD``, a period is two dates back to back."""
    if len(value) not in (DATE_LENGTH, 2 * DATE_LENGTH):
        raise DateFormatError(value, f"Invalid date format, expected YYMMDD, found {value!r}")
    for i in range(0, len(value), DATE_LENGTH):
        chunk = value[i:i + DATE_LENGTH]
        try:
            if not _DIGITS.fullmatch(chunk):
                raise ValueError(f"{chunk!r} is not numeric")
            datetime.strptime(chunk, DATE_FMT)
        except ValueError as e:
            raise DateFormatError(value, f"Invalid date {chunk!r}: {e}") from e


def check_vat_num(value: str) -> None:
    if len(value) != VAT_NUM_LENGTH or not _DIGITS.fullmatch(value):
        raise VatNumFormatError(value, f"VAT ID/NUM must be 9 digits, found: {value!r}")


def check_escaping(value: str) -> None:
    r"""``/`` must be written ``\/`` and ``\`` must be written ``\\``."""
    chars = iter(value)
    for char in chars:
        if char == "/":
            raise EscapeError(value)
        if char == "\\" and next(chars, None) not in ("\\", "/"):
            raise EscapeError(value)


def check_groups(value: str, is_condition: bool = False) -> None:
    """Validate ``a:b;c:d`` lists of numbers.

    Conditions are ``discount:days`` pairs where days is a whole number.
    """
    for group in value.split(";"):
        sub_groups = group.split(":")
        for sub_group in sub_groups:
            _parse_number(sub_group, value)
        if is_condition:
            if len(sub_groups) != 2 or not _DIGITS.fullmatch(sub_groups[1]):
                raise ConditionsFormatError(
                    value,
                    f'Conditions consist of 2 elements, "discount:days", found: {value!r}',
                )


def _parse_number(text: str, value: str) -> float:
    if text != text.strip() or "_" in text:
        raise NumberFormatError(value, f"Expected a number, found {text!r} in {value!r}")
    try:
        return float(text)
    except ValueError as e:
        raise NumberFormatError(value, f"Expected a number, found {text!r} in {value!r}") from e
