"""
Тесты для очистки токенов перед индексом.
"""
import pytest

from hotel_search.services.nlu.token_filter import clean_token, filter_valid_tokens


class TestCleanToken:
    @pytest.mark.parametrize("token,expected", [
        ("**豪华**", "豪华"),
        ("{}", None),
        ("---豪华---", "豪华"),
        ("5星级", "5星级"),
        ("Hilton", "Hilton"),
        ("Four--Points", "Four-Points"),
        ("  海景 房 ", "海景 房"),
        ("京", "京"),
        ("a", None),
        ("1", None),
        ("2024-01", None),
        ("<br>", None),
        ("NBSP", None),
        ("", None),
        (None, None),
    ])
    def test_examples(self, token, expected):
        assert clean_token(token) == expected


class TestFilterValidTokens:
    def test_mixed_list(self):
        assert filter_valid_tokens(["北京", "北京", "a", "1", "{}"]) == ["北京"]

    def test_case_insensitive_dedupe_keeps_first_casing(self):
        assert filter_valid_tokens(["Hilton", "HILTON", "hilton", "Beijing"]) == ["Hilton", "Beijing"]

    def test_dedupe_after_cleaning(self):
        assert filter_valid_tokens(["豪华", "**豪华**", "-豪华-"]) == ["豪华"]

    def test_empty(self):
        assert filter_valid_tokens([]) == []
        assert filter_valid_tokens(None) == []
