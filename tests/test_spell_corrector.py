"""
Тесты для SpellCorrectionEngine: правила, fuzzy-поиск, экспорт/импорт, перезагрузка.
"""
import json
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest

from hotel_search.models import SpellCheckRule
from hotel_search.services.errors import RuleParseError
from hotel_search.services.nlu.spell_corrector import (
    DEFAULT_RULE_LINES,
    SpellCorrectionEngine,
    canonical_domain,
    levenshtein_distance,
    max_distance_for,
    normalize_rule_text,
    parse_rule_entries,
    parse_rule_line,
)


# ============================================================================
# Helpers
# ============================================================================

class TestLevenshteinDistance:
    def test_identical_strings(self):
        assert levenshtein_distance("北京", "北京") == 0

    def test_empty_string(self):
        assert levenshtein_distance("", "hello") == 5
        assert levenshtein_distance("hello", "") == 5

    def test_one_substitution(self):
        assert levenshtein_distance("北亰", "北京") == 1

    def test_insertion(self):
        assert levenshtein_distance("希尔顿", "希尔顿店") == 1


class TestMaxDistance:
    @pytest.mark.parametrize("wrong,expected", [
        ("北亰", 1),
        ("希尔敦", 1),
        ("浦东机场", 1),
        ("上海浦东机场", 2),
        ("shanghaipudong", 2),
    ])
    def test_clamped(self, wrong, expected):
        assert max_distance_for(wrong) == expected


class TestNormalizeRuleText:
    @pytest.mark.parametrize("text,expected", [
        (" 北 亰 ", "北亰"),
        ("Hilton Hotel", "hiltonhotel"),
        ("北京，", "北京"),
        ("（北京）", "北京"),
        (None, ""),
    ])
    def test_examples(self, text, expected):
        assert normalize_rule_text(text) == expected


class TestCanonicalDomain:
    @pytest.mark.parametrize("domain,expected", [
        (None, "ALL"),
        ("", "ALL"),
        ("all", "ALL"),
        ("CN", "DOMESTIC"),
        ("hmt", "TERRITORY"),
        ("INTL", "INTERNATIONAL"),
        ("domestic", "DOMESTIC"),
    ])
    def test_legacy_labels(self, domain, expected):
        assert canonical_domain(domain) == expected


# ============================================================================
# Parsing
# ============================================================================

class TestParseRuleLine:
    def test_pipe_form(self):
        rule = parse_rule_line("geo.beijing", "北亰, 北平 | 北京 | 9 | CN | Beijing")
        assert rule.wrong_forms == ["北亰", "北平"]
        assert rule.correct_forms == ["北京"]
        assert rule.weight == 9
        assert rule.domain == "DOMESTIC"
        assert rule.description == "Beijing"

    def test_arrow_form(self):
        rule = parse_rule_line("brand.hilton", "希尔敦 -> 希尔顿 | 8 | ALL | Hilton")
        assert rule.wrong_forms == ["希尔敦"]
        assert rule.correct_forms == ["希尔顿"]
        assert rule.weight == 8

    def test_defaults(self):
        rule = parse_rule_line("x", "深坳 | 深圳")
        assert (rule.weight, rule.domain, rule.description) == (5, "ALL", "")

    @pytest.mark.parametrize("line", [
        "",
        "only-wrong-forms",
        " | 北京",
        "北亰 | ",
        "北亰 | 北京 | heavy",
        "北亰 | 北京 | 42",
    ])
    def test_malformed(self, line):
        with pytest.raises(RuleParseError):
            parse_rule_line("bad", line)

    def test_bad_entries_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            rules = parse_rule_entries({
                "good": "北亰 | 北京 | 9",
                "bad": "北亰 | 北京 | not-a-number",
                "mapping": {"wrong_forms": ["深坳"], "correct_forms": ["深圳"], "weight": 7},
            })
        assert [rule.rule_id for rule in rules] == ["good", "mapping"]
        assert "bad" in caplog.text

    def test_default_rules_parse(self):
        assert len(parse_rule_entries(DEFAULT_RULE_LINES)) == len(DEFAULT_RULE_LINES)


# ============================================================================
# Lookup
# ============================================================================

class TestCorrection:
    def test_direct_hit(self, spell_engine: SpellCorrectionEngine):
        assert spell_engine.get_correction("北亰", "ALL") == "北京"
        result = spell_engine.correct("北平")
        assert (result.corrected, result.method, result.rule_id) == ("北京", "direct", "geo.beijing")

    def test_no_match_returns_original(self, spell_engine: SpellCorrectionEngine):
        assert spell_engine.get_correction("上海外滩华尔道夫酒店", "ALL") == "上海外滩华尔道夫酒店"

    @pytest.mark.parametrize("text", [None, "", "   ", "，。"])
    def test_blank_input(self, spell_engine: SpellCorrectionEngine, text):
        assert spell_engine.get_correction(text) == (text or "")

    def test_fuzzy_within_distance(self, spell_engine: SpellCorrectionEngine):
        result = spell_engine.correct("希尔吨")
        assert result.corrected == "希尔顿"
        assert result.method == "fuzzy"
        assert result.distance == 1

    def test_domain_rules_only_apply_in_their_domain(self, spell_engine: SpellCorrectionEngine):
        # "深土" в одном шаге от "深坳"; правило DOMESTIC
        assert spell_engine.get_correction("深土", "ALL") == "深土"
        assert spell_engine.get_correction("深土", "DOMESTIC") == "深圳"
        assert spell_engine.get_correction("深土", "CN") == "深圳"

    def test_direct_hit_ignores_domain(self, spell_engine: SpellCorrectionEngine):
        assert spell_engine.get_correction("深坳", "INTERNATIONAL") == "深圳"

    def test_four_char_form_not_corrected_two_edits_away(self):
        engine = SpellCorrectionEngine(rules=parse_rule_entries({"airport.pudong": "浦东机场 | 上海浦东国际机场 | 9 | ALL"}))
        assert engine.get_correction("浦西机坊") == "浦西机坊"
        assert engine.get_correction("浦东机坊") == "上海浦东国际机场"

    def test_higher_weight_wins(self):
        engine = SpellCorrectionEngine(
            rules=parse_rule_entries({
                "low": "北亰 | 北平 | 2 | ALL",
                "high": "北亰 | 北京 | 9 | ALL",
            })
        )
        assert engine.get_correction("北亰") == "北京"

    def test_correct_tokens(self, spell_engine: SpellCorrectionEngine):
        assert spell_engine.correct_tokens(["北亰", "酒店"]) == ["北京", "酒店"]


# ============================================================================
# Mutation, export / import
# ============================================================================

class TestRuleManagement:
    def test_add_rule(self, empty_spell_engine: SpellCorrectionEngine):
        rule = SpellCheckRule(rule_id="brand.sheraton", wrong_forms=["喜来灯"], correct_forms=["喜来登"], weight=8)
        assert empty_spell_engine.add_rule(rule) is True
        assert empty_spell_engine.get_correction("喜来灯") == "喜来登"

    def test_add_rule_replaces_same_id(self, spell_engine: SpellCorrectionEngine):
        rule = SpellCheckRule(rule_id="geo.beijing", wrong_forms=["北亰"], correct_forms=["北京市"], weight=9)
        spell_engine.add_rule(rule)
        assert spell_engine.get_correction("北亰") == "北京市"
        assert len(spell_engine.rules()) == 3

    def test_remove_rule(self, spell_engine: SpellCorrectionEngine):
        assert spell_engine.remove_rule("geo.beijing") is True
        assert spell_engine.get_correction("北亰") == "北亰"
        assert spell_engine.remove_rule("geo.beijing") is False

    def test_export_import_round_trip(self, spell_engine: SpellCorrectionEngine, empty_spell_engine: SpellCorrectionEngine):
        payload = spell_engine.export_rules()
        assert empty_spell_engine.import_rules(payload) == 3

        def key(rule):
            return rule.rule_id, rule.wrong_forms, rule.correct_forms, rule.weight, rule.domain

        assert sorted(map(key, empty_spell_engine.rules())) == sorted(map(key, spell_engine.rules()))

    def test_export_is_json(self, spell_engine: SpellCorrectionEngine):
        items = json.loads(spell_engine.export_rules())
        assert {item["rule_id"] for item in items} == {"geo.beijing", "brand.hilton", "geo.shenzhen"}

    @pytest.mark.parametrize("payload", ["not json", '{"rule_id": "x"}', None])
    def test_import_rejects_bad_payload(self, empty_spell_engine: SpellCorrectionEngine, payload):
        assert empty_spell_engine.import_rules(payload) == 0
        assert empty_spell_engine.rules() == []

    def test_import_skips_bad_items(self, empty_spell_engine: SpellCorrectionEngine):
        payload = json.dumps([
            {"rule_id": "ok", "wrong_forms": ["北亰"], "correct_forms": ["北京"]},
            {"rule_id": "no-correct", "wrong_forms": ["北亰"], "correct_forms": []},
            "garbage",
        ])
        assert empty_spell_engine.import_rules(payload) == 1

    def test_rules_by_domain(self, spell_engine: SpellCorrectionEngine):
        assert [rule.rule_id for rule in spell_engine.rules("CN")] == ["geo.shenzhen"]


class TestStatistics:
    def test_usage_counted(self, spell_engine: SpellCorrectionEngine):
        spell_engine.get_correction("北亰")
        spell_engine.get_correction("北平")
        spell_engine.get_correction("希尔吨")
        stats = spell_engine.get_statistics()
        assert stats.total_rules == 3
        assert stats.total_wrong_forms == 4
        assert stats.rules_by_domain == {"ALL": 2, "DOMESTIC": 1}
        assert stats.total_usage == 3
        assert stats.top_rules[0] == {"rule_id": "geo.beijing", "usage_count": 2}
        assert stats.source == "memory"

    def test_concurrent_reads_and_writes(self, spell_engine: SpellCorrectionEngine):
        def work(i: int) -> str:
            if i % 10 == 0:
                spell_engine.add_rule(
                    SpellCheckRule(rule_id=f"extra.{i}", wrong_forms=[f"错{i}"], correct_forms=["对"])
                )
            return spell_engine.get_correction("北亰")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(work, range(100)))
        assert set(results) == {"北京"}
        assert len(spell_engine.rules()) == 13


# ============================================================================
# Loading from YAML
# ============================================================================

class TestReload:
    def test_load_from_yaml(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text(
            "rules:\n"
            "  geo.beijing: \"北亰 | 北京 | 9 | ALL | Beijing\"\n"
            "  broken: \"北亰 | 北京 | heavy\"\n"
            "  geo.xiamen: \"夏门 | 厦门 | 8 | DOMESTIC\"\n",
            encoding="utf-8",
        )
        engine = SpellCorrectionEngine(path)
        assert {rule.rule_id for rule in engine.rules()} == {"geo.beijing", "geo.xiamen"}
        assert engine.get_statistics().source == str(path)

    def test_missing_file_uses_defaults(self, tmp_path):
        engine = SpellCorrectionEngine(tmp_path / "absent.yaml")
        assert len(engine.rules()) == len(DEFAULT_RULE_LINES)
        assert engine.get_correction("北亰") == "北京"
        assert engine.get_statistics().source == "defaults"

    def test_invalid_yaml_keeps_current_rules(self, tmp_path, caplog):
        path = tmp_path / "rules.yaml"
        path.write_text("rules:\n  geo.beijing: \"北亰 | 北京\"\n", encoding="utf-8")
        engine = SpellCorrectionEngine(path)

        path.write_text("rules: [unclosed\n", encoding="utf-8")
        with caplog.at_level(logging.ERROR):
            assert engine.reload() == 1
        assert engine.get_correction("北亰") == "北京"
        assert "reload failed" in caplog.text

    def test_reload_picks_up_changes(self, tmp_path):
        path = tmp_path / "rules.yaml"
        path.write_text("rules:\n  a: \"北亰 | 北京\"\n", encoding="utf-8")
        engine = SpellCorrectionEngine(path)
        path.write_text("rules:\n  a: \"北亰 | 北京\"\n  b: \"希尔敦 | 希尔顿\"\n", encoding="utf-8")
        assert engine.reload() == 2
        assert engine.get_correction("希尔敦") == "希尔顿"

    def test_shipped_rules_file(self, settings):
        engine = SpellCorrectionEngine(settings.spellcheck_rules_path)
        assert engine.get_statistics().source == str(settings.spellcheck_rules_path)
        assert engine.get_correction("北亰") == "北京"
        assert engine.get_correction("浦东机场") == "上海浦东国际机场"
