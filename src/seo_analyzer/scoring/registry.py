# src/seo_analyzer/scoring/registry.py
from typing import List, Optional, Tuple

from .core import RuleDefinition
from .rules.readability import READABILITY_RULES
from .rules.seo import SEO_RULES

# Evaluation order: SEO rules first, then readability rules.
RULES: Tuple[RuleDefinition, ...] = SEO_RULES + READABILITY_RULES

_RULES_BY_ID = {rule.id: rule for rule in RULES}


def get_all_rules() -> Tuple[RuleDefinition, ...]:
    """Returns the full ordered rule table."""
    return RULES


def get_rules(category: Optional[str] = None) -> List[RuleDefinition]:
    """Returns the rules of one category ('seo' or 'readability'), or all rules."""
    if category is None:
        return list(RULES)
    return [rule for rule in RULES if rule.category == category]


def get_rule(rule_id: str) -> Optional[RuleDefinition]:
    """Retrieves a rule definition by its id."""
    return _RULES_BY_ID.get(rule_id)
