# categorizer/rules.py
"""
Keyword rules engine for transaction descriptions.

Features:
- Ordered rule table (earlier rules win ties)
- Optional priority (higher priority rules evaluated first, stable otherwise)
- Case-insensitive substring triggers
- Rule name tracking for audit
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from exc_core.models import UNCATEGORIZED
from exc_utils.categories import DEFAULT_RULES


@dataclass(frozen=True)
class Rule:
    """One category and the triggers that select it."""

    name: str
    category: str
    triggers: Tuple[str, ...] = field(default_factory=tuple)
    priority: int = 0  # Higher = evaluated first

    def match(self, lowered: str) -> Optional[str]:
        """Return the first trigger found in an already-lowercased description."""
        for trigger in self.triggers:
            if trigger in lowered:
                return trigger
        return None


@dataclass(frozen=True)
class RuleTable:
    rules: Tuple[Rule, ...]
    default_category: str = UNCATEGORIZED

    def __iter__(self):
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def categories(self) -> List[str]:
        out: List[str] = []
        for rule in self.rules:
            if rule.category not in out:
                out.append(rule.category)
        return out


def _slug(category: str) -> str:
    return "_".join(
        "".join(ch if ch.isalnum() else " " for ch in category.lower()).split()
    )


def _triggers(raw: Iterable[Any]) -> Tuple[str, ...]:
    # Blank triggers would match every description.
    return tuple(str(t).lower() for t in raw if str(t).strip())


def build_table(
    pairs: Sequence[Tuple[str, Sequence[str]]],
    default_category: str = UNCATEGORIZED,
) -> RuleTable:
    """Build a table from (category, triggers) pairs, keeping their order."""
    rules = tuple(
        Rule(name=_slug(category), category=category, triggers=_triggers(triggers))
        for category, triggers in pairs
    )
    return RuleTable(rules=rules, default_category=default_category)


def parse_rule(r: Dict[str, Any]) -> Rule:
    """Parse a rule from YAML config dict."""
    assign = r.get("assign", {}) or {}
    category = assign.get("category") or r.get("category")
    if not category:
        raise ValueError(f"Rule {r.get('name', 'unnamed')!r} assigns no category")

    return Rule(
        name=r.get("name") or _slug(category),
        category=category,
        triggers=_triggers(r.get("if_description_contains", []) or []),
        priority=int(r.get("priority", 0)),
    )


def compile_rules(cfg: Dict[str, Any]) -> RuleTable:
    """Compile all rules from config, sorted by priority (highest first).

    The sort is stable, so rules sharing a priority keep file order.
    """
    rules = [parse_rule(r) for r in cfg.get("rules", []) or []]
    rules.sort(key=lambda r: r.priority, reverse=True)
    d = cfg.get("defaults", {}) or {}
    return RuleTable(
        rules=tuple(rules),
        default_category=d.get("category", UNCATEGORIZED),
    )


DEFAULT_TABLE = build_table(DEFAULT_RULES)


def classify_with_rule(
    description: Optional[str], table: RuleTable = DEFAULT_TABLE
) -> Tuple[str, Optional[str]]:
    """
    Return (category, rule_name) for a description.
    First trigger hit wins, walking rules then triggers in table order.
    rule_name is None when the default category was used.
    """
    lowered = (description or "").lower()
    if lowered:
        for rule in table:
            if rule.match(lowered) is not None:
                return rule.category, rule.name
    return table.default_category, None


def classify(description: Optional[str], table: RuleTable = DEFAULT_TABLE) -> str:
    return classify_with_rule(description, table)[0]
