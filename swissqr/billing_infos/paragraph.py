"""Fold billing information into display lines."""

import logging
import math
import textwrap

logger = logging.getLogger(__name__)


Paragraph = list[str]

FOLD_THRESHOLD = 70
SPLIT_CHARS = (";", "/", "\\", ",", ".", " ")


def split_unstructured(text: str) -> Paragraph:
    """Split a long message in two around its middle.

    Messages shorter than 70 characters stay on one line. Longer ones are
    cut right after the first separator found in the middle half of the
    text. Without such a separator a single empty line is returned.
    """
    length = len(text)
    if length < FOLD_THRESHOLD:
        return [text]

    middle = length // 2
    spread = (length - middle) // 2
    lower, upper = middle - spread, middle + spread
    candidates = [
        i for i, char in enumerate(text)
        if char in SPLIT_CHARS and lower < i < upper
    ]
    if not candidates:
        # TODO: decide whether the message should be kept whole instead of dropped
        logger.warning(
            f"No split point between {lower} and {upper} in a {length} char message, "
            "message is not displayed"
        )
        return [""]

    split_at = min(candidates) + 1
    return [text[:split_at].strip(), text[split_at:].strip()]


def structured_line_count(length: int) -> int:
    """Number of lines used for ``length`` characters of structured data."""
    if 125 <= length <= 140:
        return 3
    if 70 <= length <= 124:
        return 2
    return 1


def split_structured(text: str) -> Paragraph:
    """Cut structured data into up to three contiguous, even chunks."""
    if not text:
        return []
    size = math.ceil(len(text) / structured_line_count(len(text)))
    return [text[i:i + size] for i in range(0, len(text), size)]


def make_paragraph(unstructured: str | None, structured: str | None) -> Paragraph | None:
    """Message lines first, structured lines below. None when both are empty."""
    lines: Paragraph = []
    if unstructured is not None:
        lines.extend(split_unstructured(unstructured))
    if structured:
        lines.extend(split_structured(structured))
    return lines or None


def fit_width(lines: Paragraph, max_width: int) -> Paragraph:
    """Re-wrap lines wider than ``max_width``; others are kept as they are."""
    fitted: Paragraph = []
    for line in lines:
        if len(line) <= max_width:
            fitted.append(line)
            continue
        fitted.extend(
            textwrap.wrap(line, max_width, break_long_words=True, break_on_hyphens=False)
        )
    return fitted
