"""Tests for the billing information aggregate and paragraph folding."""

import logging

import pytest

from swissqr.billing_infos import BillingInfos
from swissqr.billing_infos.paragraph import (
    fit_width,
    make_paragraph,
    split_structured,
    split_unstructured,
    structured_line_count,
)
from swissqr.billing_infos.swico import S1Builder
from swissqr.errors import (
    NotSwicoError,
    SwicoError,
    TooLongError,
    UnknownBeaconError,
)


PAYER_MESSAGE = "Message au payeur"
DOC_MESSAGE = "Invoice F248956-24RI for a new gaming chair / Gaming chair for Leon-Jaden Fanum Tax"


# ============================================================================
# Aggregate Tests
# ============================================================================


class TestUnstructured:
    """Tests for the free text message."""

    def test_standalone_message(self):
        infos = BillingInfos().add_unstructured(DOC_MESSAGE)
        assert infos.unstructured() == DOC_MESSAGE
        assert infos.structured() is None

    def test_override_wins_over_emitter(self):
        infos = (
            S1Builder()
            .add_unstructured("Unstructured from builder")
            .build()
            .add_unstructured("Unstructured from struct")
        )
        assert infos.unstructured() == "Unstructured from struct"

    def test_emitter_message_used_without_override(self):
        infos = S1Builder().add_unstructured("Unstructured from builder").build()
        assert infos.unstructured() == "Unstructured from builder"

    def test_add_returns_new_instance(self):
        original = BillingInfos.from_str("Hello//S1/10/123")
        updated = original.add_unstructured("Bye")
        assert original.unstructured() == "Hello"
        assert updated.unstructured() == "Bye"
        assert updated.emitter is original.emitter

    def test_replaces_previous_override(self):
        infos = BillingInfos().add_unstructured("first").add_unstructured("second")
        assert infos.unstructured() == "second"

    def test_too_long_message(self):
        with pytest.raises(TooLongError):
            BillingInfos().add_unstructured(DOC_MESSAGE * 10)

    def test_limit_is_inclusive(self):
        assert len(BillingInfos().add_unstructured("a" * 140)) == 140
        with pytest.raises(TooLongError):
            BillingInfos().add_unstructured("a" * 141)

    def test_limit_counts_structured(self):
        infos = BillingInfos.from_str("//S1/10/123")
        assert len(infos.add_unstructured("a" * 129)) == 140
        with pytest.raises(TooLongError) as exc_info:
            infos.add_unstructured("a" * 130)
        assert exc_info.value.length == 141

    def test_limit_counts_characters_not_bytes(self):
        assert len(BillingInfos().add_unstructured("é" * 140)) == 140


class TestFromStr:
    """Tests for parsing full billing information strings."""

    @pytest.mark.parametrize(
        "structured",
        [
            "//S1/10/10201409/11/190512/20/1400.000-53/30/106017086/31/180508/32/7.7/40/2:10;0:30",
            "//S1/10/10104/11/180228/30/395856455/31/180226180227/32/3.7:400.19;7.7:553.39;0:14/40/0:30",
            "//S1/10/4031202511/11/180107/20/61257233.4/30/105493567/32/8:49.82/33/2.5:14.85/40/0:30",
            r"//S1/10/X.66711\/8824/11/200712/20/MW-2020-04/30/107978798/32/2.5:117.22/40/3:5;1.5:20;1:40;0:60",
            r"//S1/10/24073428/11/240729/20/145258\/Dépôt/30/112806097/31/240630240731/40/3:10;0:30",
        ],
    )
    def test_valid(self, structured):
        infos = BillingInfos.from_str(PAYER_MESSAGE + structured)
        assert infos.structured() == structured
        assert infos.unstructured() == PAYER_MESSAGE
        assert infos.as_paragraph()

    def test_canonical_order(self):
        infos = BillingInfos.from_str(
            "Unstructured message to the buyer//S1/11/240711/10/10239978/20/1348 Dépôt"
            "/30/109456872/40/4:5;3:10;0:30/31/240710/32/8.1"
        )
        assert infos.structured() == (
            "//S1/10/10239978/11/240711/20/1348 Dépôt/30/109456872/31/240710/32/8.1"
            "/40/4:5;3:10;0:30"
        )

    def test_not_swico(self):
        with pytest.raises(NotSwicoError):
            BillingInfos.from_str("Just a message")

    def test_unknown_beacon(self):
        with pytest.raises(UnknownBeaconError):
            BillingInfos.from_str("//S1/10/1/50/x")

    def test_too_long(self):
        with pytest.raises(TooLongError):
            BillingInfos.from_str("x" * 130 + "//S1/10/123")

    def test_errors_share_base(self):
        with pytest.raises(SwicoError):
            BillingInfos.from_str("//S1/11/991399")


class TestLength:
    """Tests for character accounting."""

    def test_empty(self):
        infos = BillingInfos()
        assert len(infos) == 0
        assert infos.is_empty()
        assert infos.unstructured() is None
        assert infos.structured() is None
        assert infos.as_paragraph() is None

    def test_sum_of_parts(self):
        infos = BillingInfos.from_str("Hello//S1/10/123")
        assert len(infos) == len("Hello") + len("//S1/10/123")
        assert not infos.is_empty()

    def test_qr_data_fields(self):
        infos = BillingInfos.from_str("Hello//S1/10/123")
        assert infos.qr_data_fields() == ["Hello", "EPD", "//S1/10/123"]
        assert BillingInfos().qr_data_fields() == ["", "EPD", ""]


# ============================================================================
# Paragraph Tests
# ============================================================================


class TestSplitUnstructured:
    """Tests for folding the free text message."""

    def test_short_message_unchanged(self):
        assert split_unstructured(PAYER_MESSAGE) == [PAYER_MESSAGE]
        assert split_unstructured("a" * 69) == ["a" * 69]

    def test_split_after_separator(self):
        text = "a" * 40 + ";" + "b" * 39
        assert split_unstructured(text) == ["a" * 40 + ";", "b" * 39]

    def test_earliest_separator_in_window(self):
        text = "x;" + "a" * 38 + " " + "b" * 39
        assert split_unstructured(text) == ["x;" + "a" * 38, "b" * 39]

    def test_smallest_index_across_separators(self):
        text = "a" * 30 + "." + "a" * 9 + ";" + "b" * 39
        assert split_unstructured(text) == ["a" * 30 + ".", "a" * 9 + ";" + "b" * 39]

    def test_sentence(self):
        assert split_unstructured(DOC_MESSAGE) == [
            "Invoice F248956-24RI for",
            "a new gaming chair / Gaming chair for Leon-Jaden Fanum Tax",
        ]

    def test_no_split_point_returns_empty_line(self, caplog):
        with caplog.at_level(logging.WARNING, logger="swissqr.billing_infos.paragraph"):
            assert split_unstructured("a" * 200) == [""]
        assert "No split point" in caplog.text

    def test_separator_outside_window_ignored(self):
        text = "a;" + "b" * 198
        assert split_unstructured(text) == [""]


class TestSplitStructured:
    """Tests for dividing structured data into lines."""

    @pytest.mark.parametrize(
        "length, lines",
        [(0, 1), (69, 1), (70, 2), (124, 2), (125, 3), (140, 3), (141, 1)],
    )
    def test_line_count(self, length, lines):
        assert structured_line_count(length) == lines

    def test_short(self):
        assert split_structured("//S1/10/123") == ["//S1/10/123"]

    def test_two_lines(self):
        text = "x" * 85
        assert [len(line) for line in split_structured(text)] == [43, 42]

    def test_three_lines(self):
        text = "x" * 130
        chunks = split_structured(text)
        assert [len(line) for line in chunks] == [44, 44, 42]
        assert "".join(chunks) == text

    def test_empty(self):
        assert split_structured("") == []


class TestParagraph:
    """Tests for the complete display paragraph."""

    def test_message_then_structured(self, message):
        infos = S1Builder().add_unstructured(message).invoice_ref("24073428").build()
        assert infos.as_paragraph() == [
            "Paiement de septante-trois",
            "années de retard d'impôts à payer sous 10 jours",
            "//S1/10/24073428",
        ]

    def test_structured_split_below_message(self, full_builder, short_message, canonical_s1):
        paragraph = full_builder.add_unstructured(short_message).build().as_paragraph()
        assert paragraph[0] == short_message
        assert "".join(paragraph[1:]) == canonical_s1
        assert len(paragraph) == 3

    def test_structured_only(self):
        paragraph = BillingInfos.from_str("//S1/10/123").as_paragraph()
        assert paragraph == ["//S1/10/123"]

    def test_make_paragraph_empty(self):
        assert make_paragraph(None, None) is None
        assert make_paragraph(None, "") is None

    def test_max_width(self, full_builder, short_message):
        infos = full_builder.add_unstructured(short_message).build()
        paragraph = infos.as_paragraph(max_width=38)
        assert all(len(line) <= 38 for line in paragraph)
        assert len(paragraph) > 3

    def test_fit_width_keeps_short_lines(self):
        assert fit_width(["short", ""], 10) == ["short", ""]
        assert fit_width(["abc def ghi"], 7) == ["abc def", "ghi"]

    def test_display_lines_use_configured_width(self, full_builder, short_message):
        infos = full_builder.add_unstructured(short_message).build()
        assert all(len(line) <= 38 for line in infos.display_lines("receipt"))
        assert all(len(line) <= 72 for line in infos.display_lines())
        assert BillingInfos().display_lines() == []

    def test_display_lines_unknown_section(self):
        with pytest.raises(ValueError):
            BillingInfos().display_lines("header")
