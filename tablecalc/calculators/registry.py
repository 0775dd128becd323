"""
Rule registry. Maps rule names to rule classes.
"""

from ..errors import RuleNotFoundError
from .base import BaseRule
from .simple import SampleRule

RULE_REGISTRY: dict[str, type[BaseRule]] = {
    "sample": SampleRule,
}


def get_rule(name: str) -> BaseRule:
    """Returns an instance of the rule registered under name, or raises RuleNotFoundError."""
    if name not in RULE_REGISTRY:
        raise RuleNotFoundError(
            f"No rule registered for name: {name}. "
            f"Available: {list(RULE_REGISTRY.keys())}"
        )
    return RULE_REGISTRY[name]()


def has_rule(name: str) -> bool:
    """Check if a rule exists for a name."""
    return name in RULE_REGISTRY


def list_rules() -> list[str]:
    """List all registered rule names."""
    return list(RULE_REGISTRY.keys())
