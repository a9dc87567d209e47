"""Parser turning a raw ``...//S1/NN/value...`` string into a StructuredSet."""

import logging

from swissqr.billing_infos.swico.components import StructuredSet, SwicoComponent
from swissqr.errors import SwicoParseError, UnknownBeaconError

logger = logging.getLogger(__name__)


S1_MARKER = "//S1"


def s1_parser(text: str) -> StructuredSet:
    """Split ``text`` into its unstructured message and Swico S1 fields.

    Field order in the input does not matter. A beacon whose leading slash
    is escaped (``\\/10/``) belongs to the surrounding value and is not
    treated as the start of a field.

    Raises:
        UnknownBeaconError: if ``text`` contains an unknown ``/NN/`` beacon.
        SwicoParseError: if the ``//S1`` marker or every field is missing.
    """
    check_beacons(text)
    message, marker, structured = text.partition(S1_MARKER)
    if not marker:
        raise SwicoParseError(text, f"Could not find '{S1_MARKER}' in Swico string")

    structured_set = StructuredSet()
    message = message.strip()
    if message:
        structured_set[SwicoComponent.UNSTRUCTURED] = message

    offsets = sorted(
        (offset, component)
        for component in SwicoComponent.for_parsing()
        if (offset := find_beacon(structured, component.delimiter)) is not None
    )
    if not offsets:
        raise SwicoParseError(text, "No Swico field found after '//S1'")

    ends = [offset for offset, _ in offsets[1:]] + [len(structured)]
    for (start, component), end in zip(offsets, ends):
        value = structured[start:end].removeprefix(component.delimiter)
        if value:
            structured_set[component] = value

    structured_set[SwicoComponent.PREFIX] = "S1"
    logger.debug(f"Parsed {len(structured_set)} Swico fields")
    return structured_set


def check_beacons(text: str) -> None:
    """Reject any ``/NN/`` marker that is not a known Swico field."""
    for beacon in SwicoComponent.invalid_beacons():
        if beacon in text:
            raise UnknownBeaconError(beacon, f"Invalid Swico beacon/group, found: {beacon!r}")


def find_beacon(text: str, beacon: str) -> int | None:
    """Offset of the first unescaped ``beacon`` in ``text``, if any."""
    offset = text.find(beacon)
    while offset != -1:
        backslashes = len(text[:offset]) - len(text[:offset].rstrip("\\"))
        if backslashes % 2 == 0:
            return offset
        offset = text.find(beacon, offset + 1)
    return None
