"""
SpellCorrectionEngine - исправление опечаток в названиях городов, аэропортов и брендов.

Использует:
- Правила из YAML (`hotel_search/data/spellcheck_rules.yaml`), перечитываются через reload()
- Прямой индекс "ошибка -> первая правильная форма"
- Расстояние Левенштейна для fuzzy fallback по правилам, отсортированным по весу

Формат правила: "ошибка1,ошибка2 | верно1,верно2 | вес | домен | описание".
Чтение идёт по неизменяемому снимку, запись собирает новый снимок и подменяет
его под одной блокировкой.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

import yaml
from pydantic import ValidationError

from ...config import get_settings
from ...models import ALL_DOMAINS, SpellCheckRule, SpellCheckStatistics
from ..errors import ConfigLoadError, RuleParseError
from .alias_normalizer import strip_marks

logger = logging.getLogger(__name__)

# ============================================================================
# Правила по умолчанию (если файл конфигурации не найден)
# ============================================================================

DEFAULT_RULE_LINES: Dict[str, str] = {
    # География
    "geo.beijing": "北亰,北平 | 北京 | 9 | ALL | Beijing geographic error correction",
    "geo.shenzhen": "深坳,深壕 | 深圳 | 8 | DOMESTIC | Shenzhen geographic error correction",
    "geo.shanghai": "上海市 | 上海 | 7 | DOMESTIC | City name suffix removal",
    "geo.guangzhou": "广州市 | 广州 | 7 | DOMESTIC | City name suffix removal",
    # Аэропорты
    "airport.capital": "首都机场,PEK | 北京首都国际机场 | 9 | DOMESTIC | Capital airport standardization",
    "airport.pudong": "浦东机场,PVG | 上海浦东国际机场 | 9 | DOMESTIC | Pudong airport standardization",
    "airport.hongqiao": "虹桥机场,SHA | 上海虹桥国际机场 | 8 | DOMESTIC | Hongqiao airport standardization",
    # Бренды
    "brand.hilton": "希尔敦,Hilton Hotel | 希尔顿 | 9 | ALL | Hilton brand correction",
    "brand.marriott": "万豪酒店,Marriott Hotel | 万豪 | 9 | ALL | Marriott brand correction",
    "brand.intercontinental": "洲际酒店,InterContinental Hotel | 洲际 | 9 | ALL | InterContinental brand correction",
}

# Старые метки бизнес-доменов -> текущие
DOMAIN_ALIASES: Dict[str, str] = {
    "CN": "DOMESTIC",
    "HMT": "TERRITORY",
    "INTL": "INTERNATIONAL",
}

_WHITESPACE = re.compile(r"\s+")
_PUNCTUATION = re.compile(r"[，。！？；：,.!?;:\"'“”‘’（）【】()\[\]]")


def normalize_rule_text(text: Optional[str]) -> str:
    """Key used for both rule wrong-forms and incoming text."""
    if not text:
        return ""
    value = strip_marks(text.strip().lower())
    value = _WHITESPACE.sub("", value)
    return _PUNCTUATION.sub("", value)


def canonical_domain(domain: Optional[str]) -> str:
    value = (domain or "").strip().upper()
    if not value:
        return ALL_DOMAINS
    return DOMAIN_ALIASES.get(value, value)


def max_distance_for(wrong_form: str) -> int:
    return min(2, max(1, len(wrong_form) // 3))


def levenshtein_distance(s1: str, s2: str) -> int:
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            # Стоимость вставки, удаления, замены
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def parse_rule_line(rule_id: str, line: str) -> SpellCheckRule:
    """Parse one pipe-delimited rule; raises RuleParseError on bad input.

    The first segment may also carry `wrong -> correct`, in which case the
    remaining segments shift left by one.
    """
    if not isinstance(line, str) or not line.strip():
        raise RuleParseError(reason="empty rule", debug={"rule_id": rule_id})

    parts = [part.strip() for part in line.split("|")]
    if "->" in parts[0]:
        wrong_part, correct_part = (chunk.strip() for chunk in parts[0].split("->", 1))
        rest = parts[1:]
    else:
        if len(parts) < 2:
            raise RuleParseError(reason="missing correct forms", debug={"rule_id": rule_id, "line": line})
        wrong_part, correct_part = parts[0], parts[1]
        rest = parts[2:]

    wrong_forms = [normalize_rule_text(w) for w in wrong_part.split(",")]
    wrong_forms = [w for w in dict.fromkeys(wrong_forms) if w]
    correct_forms = [c.strip() for c in correct_part.split(",") if c.strip()]
    if not wrong_forms or not correct_forms:
        raise RuleParseError(reason="empty wrong or correct forms", debug={"rule_id": rule_id, "line": line})

    weight = 5
    if rest and rest[0]:
        try:
            weight = int(rest[0])
        except ValueError:
            raise RuleParseError(reason=f"bad weight {rest[0]!r}", debug={"rule_id": rule_id}) from None
    domain = canonical_domain(rest[1] if len(rest) > 1 else None)
    description = rest[2] if len(rest) > 2 else ""

    try:
        return SpellCheckRule(
            rule_id=rule_id,
            wrong_forms=wrong_forms,
            correct_forms=correct_forms,
            weight=weight,
            domain=domain,
            description=description,
        )
    except ValidationError as exc:
        raise RuleParseError(reason=str(exc.errors()[0].get("msg")), debug={"rule_id": rule_id}) from exc


def parse_rule_entries(entries: Mapping[str, Any]) -> List[SpellCheckRule]:
    """Parse a `rule_id -> line|mapping` table, skipping and logging bad entries."""
    rules: List[SpellCheckRule] = []
    for rule_id, value in entries.items():
        try:
            if isinstance(value, Mapping):
                rules.append(_rule_from_mapping({**value, "rule_id": str(rule_id)}))
            else:
                rules.append(parse_rule_line(str(rule_id), value))
        except RuleParseError as exc:
            logger.warning("Skipping spellcheck rule %s: %s", rule_id, exc.reason)
    return rules


def _rule_from_mapping(data: Mapping[str, Any]) -> SpellCheckRule:
    try:
        rule = SpellCheckRule.model_validate(dict(data))
    except ValidationError as exc:
        raise RuleParseError(reason=str(exc.errors()[0].get("msg")), debug={"data": dict(data)}) from exc
    wrong_forms = [w for w in dict.fromkeys(normalize_rule_text(w) for w in rule.wrong_forms) if w]
    correct_forms = [c.strip() for c in rule.correct_forms if c and c.strip()]
    if not wrong_forms or not correct_forms:
        raise RuleParseError(reason="empty wrong or correct forms", debug={"rule_id": rule.rule_id})
    return rule.model_copy(
        update={
            "wrong_forms": wrong_forms,
            "correct_forms": correct_forms,
            "domain": canonical_domain(rule.domain),
        }
    )


@dataclass
class CorrectionResult:
    original: str
    corrected: str
    was_corrected: bool
    rule_id: Optional[str] = None
    method: Optional[str] = None  # "direct" | "fuzzy"
    distance: int = 0


@dataclass
class _RuleUsage:
    count: int = 0
    last_used: Optional[datetime] = None


@dataclass(frozen=True)
class _RuleSnapshot:
    rules: Tuple[SpellCheckRule, ...]
    direct: Mapping[str, SpellCheckRule]
    by_domain: Mapping[str, Tuple[SpellCheckRule, ...]]
    source: str
    loaded_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def build(cls, rules: Iterable[SpellCheckRule], source: str) -> "_RuleSnapshot":
        # Одинаковый rule_id: побеждает последнее правило
        unique: Dict[str, SpellCheckRule] = {}
        for rule in rules:
            unique[rule.rule_id] = rule
        ordered = tuple(unique.values())
        by_weight = sorted(ordered, key=lambda r: r.weight, reverse=True)

        direct: Dict[str, SpellCheckRule] = {}
        for rule in by_weight:
            for wrong in rule.wrong_forms:
                direct.setdefault(wrong, rule)

        by_domain: Dict[str, List[SpellCheckRule]] = {}
        for rule in by_weight:
            by_domain.setdefault(rule.domain, []).append(rule)

        return cls(
            rules=ordered,
            direct=MappingProxyType(direct),
            by_domain=MappingProxyType({k: tuple(v) for k, v in by_domain.items()}),
            source=source,
        )

    def fuzzy_candidates(self, domain: str) -> List[SpellCheckRule]:
        candidates = list(self.by_domain.get(ALL_DOMAINS, ()))
        if domain != ALL_DOMAINS:
            candidates.extend(self.by_domain.get(domain, ()))
        candidates.sort(key=lambda r: r.weight, reverse=True)
        return candidates


class SpellCorrectionEngine:
    """
    Hot-reloadable weighted typo correction.

    Lookup order:
    1. Прямое совпадение нормализованного текста с ошибочной формой
    2. Fuzzy: правила ALL + домена по убыванию веса, distance <= clamp(len//3, 1, 2)
    3. Иначе исходный текст без изменений
    """

    def __init__(
        self,
        rules_path: Path | str | None = None,
        *,
        rules: Iterable[SpellCheckRule] | None = None,
    ) -> None:
        if rules_path is None and rules is None:
            rules_path = get_settings().spellcheck_rules_path
        self._rules_path = Path(rules_path) if rules_path else None
        self._write_lock = Lock()
        self._usage_lock = Lock()
        self._usage: Dict[str, _RuleUsage] = {}

        if rules is not None:
            self._snapshot = _RuleSnapshot.build(rules, source="memory")
        else:
            self._snapshot = _RuleSnapshot.build((), source="empty")
            self.reload()

    # ------------------------------------------------------------------ lookup

    def correct(self, text: Optional[str], domain: Optional[str] = ALL_DOMAINS) -> CorrectionResult:
        original = text or ""
        normalized = normalize_rule_text(original)
        if not normalized:
            return CorrectionResult(original=original, corrected=original, was_corrected=False)

        snapshot = self._snapshot
        rule = snapshot.direct.get(normalized)
        if rule is not None:
            self._record_usage(rule.rule_id)
            return CorrectionResult(
                original=original,
                corrected=rule.primary_correction,
                was_corrected=rule.primary_correction != original,
                rule_id=rule.rule_id,
                method="direct",
            )

        for rule in snapshot.fuzzy_candidates(canonical_domain(domain)):
            for wrong in rule.wrong_forms:
                limit = max_distance_for(wrong)
                if abs(len(wrong) - len(normalized)) > limit:
                    continue
                distance = levenshtein_distance(normalized, wrong)
                if distance <= limit:
                    self._record_usage(rule.rule_id)
                    return CorrectionResult(
                        original=original,
                        corrected=rule.primary_correction,
                        was_corrected=rule.primary_correction != original,
                        rule_id=rule.rule_id,
                        method="fuzzy",
                        distance=distance,
                    )

        return CorrectionResult(original=original, corrected=original, was_corrected=False)

    def get_correction(self, text: Optional[str], domain: Optional[str] = ALL_DOMAINS) -> str:
        """Corrected text, or `text` unchanged when no rule matches."""
        return self.correct(text, domain).corrected

    def correct_tokens(self, tokens: Iterable[str], domain: Optional[str] = ALL_DOMAINS) -> List[str]:
        return [self.get_correction(token, domain) for token in tokens]

    # ------------------------------------------------------------------ mutation

    def add_rule(self, rule: SpellCheckRule) -> bool:
        """Add or replace (by rule_id) one rule."""
        try:
            rule = _rule_from_mapping(rule.model_dump())
        except RuleParseError as exc:
            logger.warning("Rejected spellcheck rule %s: %s", rule.rule_id, exc.reason)
            return False
        with self._write_lock:
            current = self._snapshot
            self._snapshot = _RuleSnapshot.build((*current.rules, rule), source=current.source)
        logger.info("Spellcheck rule added: %s %s -> %s", rule.rule_id, rule.wrong_forms, rule.correct_forms)
        return True

    def remove_rule(self, rule_id: str) -> bool:
        with self._write_lock:
            current = self._snapshot
            remaining = [rule for rule in current.rules if rule.rule_id != rule_id]
            if len(remaining) == len(current.rules):
                return False
            self._snapshot = _RuleSnapshot.build(remaining, source=current.source)
        with self._usage_lock:
            self._usage.pop(rule_id, None)
        logger.info("Spellcheck rule removed: %s", rule_id)
        return True

    def reload(self) -> int:
        """Re-read the rules file and swap the rule set; returns the rule count in effect."""
        try:
            rules, source = self._read_rules()
        except ConfigLoadError as exc:
            logger.error("Spellcheck config reload failed, keeping %d rules: %s", len(self._snapshot.rules), exc.reason, exc_info=exc.__cause__)
            return len(self._snapshot.rules)

        snapshot = _RuleSnapshot.build(rules, source=source)
        with self._write_lock:
            self._snapshot = snapshot
        logger.info("Spellcheck rules loaded: source=%s rules=%d direct=%d", source, len(snapshot.rules), len(snapshot.direct))
        return len(snapshot.rules)

    def _read_rules(self) -> Tuple[List[SpellCheckRule], str]:
        path = self._rules_path
        if path is None or not path.exists():
            logger.warning("Spellcheck config not found at %s, using built-in defaults", path)
            return parse_rule_entries(DEFAULT_RULE_LINES), "defaults"
        try:
            with path.open("r", encoding="utf-8") as fp:
                data = yaml.safe_load(fp) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigLoadError(reason=f"cannot read {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise ConfigLoadError(reason=f"{path} must contain a mapping")
        entries = data.get("rules") or {}
        if not isinstance(entries, Mapping):
            raise ConfigLoadError(reason=f"{path}: 'rules' must be a mapping")
        return parse_rule_entries(entries), str(path)

    # ------------------------------------------------------------------ export / import

    def rules(self, domain: Optional[str] = None) -> List[SpellCheckRule]:
        """Rules with their live usage counters merged in."""
        snapshot = self._snapshot
        selected = snapshot.rules
        if domain is not None:
            wanted = canonical_domain(domain)
            selected = tuple(rule for rule in selected if rule.domain == wanted)
        with self._usage_lock:
            usage = {rule_id: (u.count, u.last_used) for rule_id, u in self._usage.items()}
        result: List[SpellCheckRule] = []
        for rule in selected:
            count, last_used = usage.get(rule.rule_id, (0, None))
            result.append(rule.model_copy(update={"usage_count": rule.usage_count + count, "last_used": last_used or rule.last_used}))
        return result

    def export_rules(self) -> str:
        return json.dumps([rule.model_dump(mode="json") for rule in self.rules()], ensure_ascii=False, indent=2)

    def import_rules(self, payload: str) -> int:
        """Merge rules from an `export_rules` payload; returns how many were accepted."""
        try:
            items = json.loads(payload)
        except (TypeError, ValueError) as exc:
            logger.error("Spellcheck import failed: %s", exc)
            return 0
        if not isinstance(items, list):
            logger.error("Spellcheck import failed: expected a JSON list, got %s", type(items).__name__)
            return 0

        accepted: List[SpellCheckRule] = []
        for item in items:
            if not isinstance(item, Mapping):
                logger.warning("Skipping imported spellcheck rule: not an object")
                continue
            try:
                accepted.append(_rule_from_mapping(item))
            except RuleParseError as exc:
                logger.warning("Skipping imported spellcheck rule: %s", exc.reason)

        if accepted:
            with self._write_lock:
                current = self._snapshot
                self._snapshot = _RuleSnapshot.build((*current.rules, *accepted), source=current.source)
        logger.info("Spellcheck import: accepted=%d total=%d", len(accepted), len(items))
        return len(accepted)

    def get_statistics(self) -> SpellCheckStatistics:
        snapshot = self._snapshot
        rules = self.rules()
        by_domain: Dict[str, int] = {}
        for rule in rules:
            by_domain[rule.domain] = by_domain.get(rule.domain, 0) + 1
        used = sorted((r for r in rules if r.usage_count), key=lambda r: r.usage_count, reverse=True)
        return SpellCheckStatistics(
            total_rules=len(rules),
            total_wrong_forms=len(snapshot.direct),
            rules_by_domain=by_domain,
            total_usage=sum(r.usage_count for r in rules),
            top_rules=[{"rule_id": r.rule_id, "usage_count": r.usage_count} for r in used[:10]],
            source=snapshot.source,
            loaded_at=snapshot.loaded_at,
        )

    # ------------------------------------------------------------------ usage

    def _record_usage(self, rule_id: str) -> None:
        # Счётчики best-effort: под нагрузкой инкремент можно пропустить
        if not self._usage_lock.acquire(blocking=False):
            return
        try:
            usage = self._usage.setdefault(rule_id, _RuleUsage())
            usage.count += 1
            usage.last_used = datetime.now(timezone.utc)
        finally:
            self._usage_lock.release()


# =============================================================================
# Синглтон
# =============================================================================

_spell_engine: SpellCorrectionEngine | None = None


def get_spell_engine() -> SpellCorrectionEngine:
    """Возвращает singleton-экземпляр SpellCorrectionEngine."""
    global _spell_engine
    if _spell_engine is None:
        _spell_engine = SpellCorrectionEngine()
    return _spell_engine


def reset_spell_engine() -> None:
    """Сбрасывает singleton (для тестов)."""
    global _spell_engine
    _spell_engine = None
