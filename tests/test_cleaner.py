"""Tests for tracking-parameter cleanup."""

from __future__ import annotations

import pytest

from linkgrab.scraper.cleaner import cleanup_tracking_params
from linkgrab.scraper.models import DEFAULT_TRACKING_PARAMS, CleanupConfig

_ENABLED = CleanupConfig(enabled=True)


def _clean(url: str) -> str:
    return cleanup_tracking_params(url, _ENABLED)


class TestCleanupTrackingParams:
    def test_removes_utm_and_keeps_the_rest(self) -> None:
        assert _clean("https://e.com/a?utm_source=x&id=1") == "https://e.com/a?id=1"

    def test_removes_all_utm_params(self) -> None:
        url = "https://example.com/page?utm_source=google&utm_medium=cpc&utm_campaign=test&real_param=keep"
        assert _clean(url) == "https://example.com/page?real_param=keep"

    def test_only_tracking_params_drops_query(self) -> None:
        url = "https://example.com/?utm_source=facebook&utm_medium=social"
        assert _clean(url) == "https://example.com/"

    def test_various_trackers_preserve_order(self) -> None:
        url = "https://shop.example.com/item?gclid=123&fbclid=456&price=100&color=red&ref=newsletter"
        assert _clean(url) == "https://shop.example.com/item?price=100&color=red"

    def test_amazon_params(self) -> None:
        url = "https://amazon.com/product?tag=mytag&linkCode=123&creativeASIN=B123&productId=456"
        assert _clean(url) == "https://amazon.com/product?productId=456"

    def test_no_query_is_untouched(self) -> None:
        assert _clean("https://example.com/page") == "https://example.com/page"
        assert _clean("https://example.com/page#section") == "https://example.com/page#section"

    def test_scheme_host_and_empty_fragment_are_untouched(self) -> None:
        assert _clean("HTTPS://E.com/a?utm_source=1&q=2#") == "HTTPS://E.com/a?q=2#"

    def test_only_tracking_params_keeps_fragment(self) -> None:
        assert _clean("https://e.com/a?fbclid=1#section") == "https://e.com/a#section"

    def test_question_mark_inside_fragment_is_not_a_query(self) -> None:
        url = "https://e.com/a#frag?utm_source=x"
        assert _clean(url) == url

    def test_fragment_survives(self) -> None:
        assert _clean("https://e.com/a?utm_term=x&q=1#top") == "https://e.com/a?q=1#top"

    def test_encoding_of_kept_values_is_preserved(self) -> None:
        url = "https://api.example.com/endpoint?data=%7B%22key%22%3A%22value%22%7D&utm_campaign=test"
        assert _clean(url) == "https://api.example.com/endpoint?data=%7B%22key%22%3A%22value%22%7D"

    def test_empty_tracking_value(self) -> None:
        assert _clean("https://example.com/?utm_source=&real_param=value") == "https://example.com/?real_param=value"

    def test_special_characters(self) -> None:
        url = "https://example.com/?utm_source=test%20space&param=keep%20this"
        assert _clean(url) == "https://example.com/?param=keep%20this"

    def test_match_is_case_sensitive(self) -> None:
        url = "https://example.com/?UTM_SOURCE=test&utm_source=test&param=keep"
        assert _clean(url) == "https://example.com/?UTM_SOURCE=test&param=keep"

    def test_valueless_param_is_matched_by_name(self) -> None:
        assert _clean("https://e.com/?track&q=1") == "https://e.com/?q=1"

    def test_percent_encoded_name_is_decoded_before_matching(self) -> None:
        assert _clean("https://e.com/?utm%5Fsource=x&q=1") == "https://e.com/?q=1"

    def test_clean_url_is_returned_verbatim(self) -> None:
        url = "https://e.com/a?b=1&&c=%41"
        assert _clean(url) == url

    @pytest.mark.parametrize(
        "url",
        [
            "https://e.com/a?utm_source=x&id=1",
            "https://e.com/?fbclid=1",
            "https://e.com/a?x=1&gclid=2&y=3#frag",
            "https://e.com/a?UTM_SOURCE=1",
        ],
    )
    def test_idempotent(self, url: str) -> None:
        once = _clean(url)
        assert _clean(once) == once

    def test_disabled_returns_input(self) -> None:
        url = "https://e.com/a?utm_source=x&id=1"
        assert cleanup_tracking_params(url, CleanupConfig(enabled=False)) == url

    def test_custom_denylist(self) -> None:
        config = CleanupConfig(enabled=True, denylist=frozenset({"session"}))
        url = "https://e.com/?session=abc&utm_source=x"
        assert cleanup_tracking_params(url, config) == "https://e.com/?utm_source=x"

    def test_with_extra_extends_defaults(self) -> None:
        config = CleanupConfig().with_extra(["session"])
        assert "session" in config.denylist
        assert DEFAULT_TRACKING_PARAMS <= config.denylist
        assert cleanup_tracking_params("https://e.com/?session=1&utm_source=2&q=3", config) == "https://e.com/?q=3"


class TestDefaultTrackingParams:
    def test_covers_common_trackers(self) -> None:
        for name in ("utm_source", "utm_medium", "utm_campaign", "gclid", "fbclid", "ref", "track"):
            assert name in DEFAULT_TRACKING_PARAMS

    def test_reasonable_size(self) -> None:
        assert 10 < len(DEFAULT_TRACKING_PARAMS) < 50
