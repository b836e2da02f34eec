from .base import Category, Ruleset, make_category
from .yahtzee import yahtzee_rules

AVAILABLE_RULESETS = {r.name: r for r in (yahtzee_rules,)}
