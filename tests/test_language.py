"""
Тесты для LanguageClassifier.
"""
import pytest

from hotel_search.models import BilingualField
from hotel_search.services.nlu.language import Language, LanguageClassifier, count_scripts


class TestClassify:
    @pytest.mark.parametrize("text,expected", [
        ("北京", Language.ZH),
        ("Beijing", Language.EN),
        ("", Language.UNKNOWN),
        (None, Language.UNKNOWN),
        ("12345 !!", Language.UNKNOWN),
        ("北京Hilton希尔顿", Language.EN),  # 5 иероглифов < 6 латинских букв
        ("北京希尔顿Hi", Language.ZH),
        ("北京ab", Language.MIXED),
        ("Café", Language.EN),
    ])
    def test_examples(self, classifier: LanguageClassifier, text, expected):
        assert classifier.classify(text) is expected

    def test_count_scripts(self):
        assert count_scripts("北京 Hotel 123") == (2, 5)


class TestAssign:
    def test_chinese_address(self, classifier: LanguageClassifier):
        assert classifier.assign("北京市朝阳区") == BilingualField(chinese="北京市朝阳区", english=None)

    def test_english(self, classifier: LanguageClassifier):
        assert classifier.assign(" Hilton Beijing ") == BilingualField(english="Hilton Beijing")

    def test_mixed_tie_goes_english(self, classifier: LanguageClassifier):
        assert classifier.assign("北京ab") == BilingualField(english="北京ab")

    def test_unknown_goes_english(self, classifier: LanguageClassifier):
        assert classifier.assign("+86 10 1234") == BilingualField(english="+86 10 1234")

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_blank(self, classifier: LanguageClassifier, text):
        assert classifier.assign(text).is_empty


class TestMerge:
    def test_keeps_existing_values(self, classifier: LanguageClassifier):
        merged = classifier.merge("北京", "Beijing", "上海")
        assert merged == BilingualField(chinese="北京", english="Beijing")

    def test_fills_empty_side_from_fallback(self, classifier: LanguageClassifier):
        merged = classifier.merge(None, "Beijing", "北京")
        assert merged == BilingualField(chinese="北京", english="Beijing")

    def test_fallback_in_wrong_language_is_ignored(self, classifier: LanguageClassifier):
        merged = classifier.merge(None, "Beijing", "Peking")
        assert merged == BilingualField(english="Beijing")

    def test_blank_existing_treated_as_missing(self, classifier: LanguageClassifier):
        merged = classifier.merge("  ", None)
        assert merged.is_empty


class TestAssignFromPriorityList:
    def test_first_per_language_wins(self, classifier: LanguageClassifier):
        field = classifier.assign_from_priority_list(None, "Hilton", "希尔顿", "Marriott", "万豪")
        assert field == BilingualField(chinese="希尔顿", english="Hilton")
