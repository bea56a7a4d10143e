# categorizer/service.py
"""
Categorizer service: classifies descriptions with the built-in rule table
or one loaded from YAML.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

import yaml

from categorizer.rules import (
    DEFAULT_TABLE,
    RuleTable,
    classify_with_rule,
    compile_rules,
)

LOGGER = logging.getLogger(__name__)


class CategorizerService:
    """Service for categorizing descriptions using keyword rules."""

    def __init__(self, rules_path: Optional[str] = None):
        self.table: RuleTable = DEFAULT_TABLE
        self.source = "built-in"
        if rules_path:
            p = Path(rules_path)
            if p.exists():
                with open(p, "r", encoding="utf-8") as f:
                    cfg = yaml.safe_load(f) or {}
                if cfg.get("rules"):
                    self.table = compile_rules(cfg)
                    self.source = str(p)
                else:
                    LOGGER.info("No rules in %s; using built-in defaults.", p)
            else:
                LOGGER.info("Rules file not found at %s; using built-in defaults.", p)

    def classify(self, description: Optional[str]) -> str:
        return classify_with_rule(description, self.table)[0]

    def classify_with_rule(self, description: Optional[str]) -> Tuple[str, Optional[str]]:
        """
        Return (category, rule_name).
        rule_name is None if no rule matched (default category used).
        """
        return classify_with_rule(description, self.table)

    def get_rule_count(self) -> int:
        """Return number of rules configured."""
        return len(self.table)
