"""Tests for Accept-Language parsing and ranking."""

import pytest

from autolanguage.services.accept_language import (
    base_code,
    get_preferred_language,
    parse_accept_language,
)


class TestBaseCode:
    def test_region_stripped(self) -> None:
        assert base_code("en-US") == "en"

    def test_script_stripped(self) -> None:
        assert base_code("zh-Hant") == "zh"

    def test_only_last_subtag_stripped(self) -> None:
        assert base_code("zh-Hant-TW") == "zh-hant"

    def test_numeric_region_kept(self) -> None:
        assert base_code("es-419") == "es-419"

    def test_plain_code_lowercased(self) -> None:
        assert base_code(" NL ") == "nl"


class TestParseAcceptLanguage:
    def test_weights_accumulate_per_base_code(self) -> None:
        ranked = parse_accept_language("en-US,en;q=0.8,nl;q=0.9")
        assert [w.code for w in ranked] == ["en", "nl"]
        assert ranked[0].weight == pytest.approx(1.8)
        assert ranked[1].weight == pytest.approx(0.9)

    def test_default_quality_is_one(self) -> None:
        ranked = parse_accept_language("de")
        assert ranked[0].weight == 1.0
        assert isinstance(ranked[0].weight, float)

    def test_empty_q_counts_as_default(self) -> None:
        ranked = parse_accept_language("fr;q=,de;q=0.5")
        assert ranked[0].code == "fr"
        assert ranked[0].weight == 1.0

    def test_non_numeric_quality_skips_directive(self) -> None:
        ranked = parse_accept_language("fr;q=abc,de;q=0.5")
        assert [w.code for w in ranked] == ["de"]

    @pytest.mark.parametrize("quality", ["nan", "inf", "-inf", "1e400", "1.5", "-0.1"])
    def test_out_of_range_quality_skips_directive(self, quality) -> None:
        ranked = parse_accept_language(f"en;q={quality},fr;q=0.2")
        assert [w.code for w in ranked] == ["fr"]

    def test_whitespace_after_commas(self) -> None:
        ranked = parse_accept_language("nl,   en;q=0.3")
        assert [w.code for w in ranked] == ["nl", "en"]

    def test_extra_params_ignored(self) -> None:
        ranked = parse_accept_language("en;level=1;q=0.4,nl;q=0.6")
        assert [w.code for w in ranked] == ["nl", "en"]
        assert ranked[1].weight == pytest.approx(0.4)

    def test_ties_keep_first_seen_order(self) -> None:
        ranked = parse_accept_language("nl;q=0.5,de;q=0.5,en;q=0.5")
        assert [w.code for w in ranked] == ["nl", "de", "en"]

    def test_wildcard_is_just_another_code(self) -> None:
        ranked = parse_accept_language("*;q=0.1")
        assert ranked[0].code == "*"

    @pytest.mark.parametrize("header", [None, "", "   ", ",,"])
    def test_empty_input(self, header) -> None:
        assert parse_accept_language(header) == []

    def test_fresh_result_every_call(self) -> None:
        first = parse_accept_language("en")
        second = parse_accept_language("en")
        assert first == second
        assert first is not second
        assert second[0].weight == 1.0


class TestGetPreferredLanguage:
    def test_accumulated_weight_wins(self) -> None:
        assert get_preferred_language("en-US,en;q=0.8,nl;q=0.9", ["en", "nl"]) == "en"

    def test_highest_allowed_returned(self) -> None:
        assert get_preferred_language("fr,de;q=0.9,nl;q=0.2", ["nl", "de"]) == "de"

    def test_nothing_allowed(self) -> None:
        assert get_preferred_language("fr;q=0.9", ["en"]) is None

    def test_nan_quality_does_not_outrank(self) -> None:
        assert get_preferred_language("en;q=nan,fr", ["en", "fr"]) == "fr"

    def test_allowed_compared_lower_cased(self) -> None:
        assert get_preferred_language("en-US", ["EN"]) == "en"

    def test_absent_header(self) -> None:
        assert get_preferred_language(None, ["en"]) is None

    def test_region_variants_outrank_single_entry(self) -> None:
        header = "nl;q=0.9,en-GB;q=0.5,en-US;q=0.5"
        assert get_preferred_language(header, ["en", "nl"]) == "en"

    def test_zero_quality_still_matches(self) -> None:
        assert get_preferred_language("nl;q=0", ["nl"]) == "nl"
