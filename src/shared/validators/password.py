"""Password rule set and strength evaluation."""

import re
from collections.abc import Callable, Iterable, Sequence
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(r"[^A-Za-z0-9]")

MIN_PASSWORD_LENGTH = 8


class UnknownPasswordRuleError(ValueError):
    """Raised when a rule set references a rule key that is not in the catalog."""

    def __init__(self, key: str):
        super().__init__(f"Unknown password rule '{key}', expected one of {sorted(PASSWORD_RULE_CATALOG)}")
        self.key = key


class UnknownRuleSetError(ValueError):
    """Raised when a named rule set does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Unknown password rule set '{name}', expected one of {sorted(RULE_SETS)}")
        self.name = name


class Rule(BaseModel):
    """A named boolean predicate over a password candidate."""

    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    test: Callable[[str], bool]


class RuleResult(BaseModel):
    """Outcome of one rule against one candidate."""

    model_config = ConfigDict(frozen=True)

    label: str
    passed: bool


class StrengthLevel(StrEnum):
    """Password strength tiers."""

    NONE = "none"
    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class StrengthVerdict(BaseModel):
    """Strength tier with its display label."""

    model_config = ConfigDict(frozen=True)

    level: StrengthLevel
    label: str


_VERDICTS = {
    StrengthLevel.NONE: StrengthVerdict(level=StrengthLevel.NONE, label=""),
    StrengthLevel.WEAK: StrengthVerdict(level=StrengthLevel.WEAK, label="Weak"),
    StrengthLevel.MEDIUM: StrengthVerdict(level=StrengthLevel.MEDIUM, label="Medium"),
    StrengthLevel.STRONG: StrengthVerdict(level=StrengthLevel.STRONG, label="Strong"),
}

# Catalog order is the display order of the strict checklist
PASSWORD_RULE_CATALOG: dict[str, Rule] = {
    rule.key: rule
    for rule in (
        Rule(key="min_length", label="At least 8 characters", test=lambda v: len(v) >= MIN_PASSWORD_LENGTH),
        Rule(key="uppercase", label="One uppercase letter", test=lambda v: _UPPERCASE.search(v) is not None),
        Rule(key="lowercase", label="One lowercase letter", test=lambda v: _LOWERCASE.search(v) is not None),
        Rule(key="digit", label="One number", test=lambda v: _DIGIT.search(v) is not None),
        Rule(
            key="special_character",
            label="One special character",
            test=lambda v: _SPECIAL.search(v) is not None,
        ),
    )
}


def compose_rule_set(keys: Iterable[str]) -> tuple[Rule, ...]:
    """Build a rule set from catalog keys, preserving the given order.

    Args:
        keys: Rule keys from PASSWORD_RULE_CATALOG

    Returns:
        Immutable tuple of rules

    Raises:
        UnknownPasswordRuleError: If a key is not in the catalog

    Examples:
        >>> [rule.label for rule in compose_rule_set(["digit", "uppercase"])]
        ['One number', 'One uppercase letter']

    """
    rules = []
    for key in keys:
        if key not in PASSWORD_RULE_CATALOG:
            raise UnknownPasswordRuleError(key)
        rules.append(PASSWORD_RULE_CATALOG[key])
    return tuple(rules)


PASSWORD_RULES = compose_rule_set(["min_length", "uppercase", "lowercase", "digit"])
STRICT_PASSWORD_RULES = compose_rule_set(PASSWORD_RULE_CATALOG)

RULE_SETS: dict[str, tuple[Rule, ...]] = {
    "standard": PASSWORD_RULES,
    "strict": STRICT_PASSWORD_RULES,
}


def get_rule_set(name: str) -> tuple[Rule, ...]:
    """Look up a named rule set ("standard" or "strict")."""
    try:
        return RULE_SETS[name]
    except KeyError:
        raise UnknownRuleSetError(name) from None


def evaluate(candidate: str, rules: Sequence[Rule] = PASSWORD_RULES) -> list[RuleResult]:
    """Run every rule against the candidate.

    All rules are evaluated even after a failure so callers can render the
    full checklist. Results are in rule order.
    """
    return [RuleResult(label=rule.label, passed=rule.test(candidate)) for rule in rules]


def strength(candidate: str, rules: Sequence[Rule] = PASSWORD_RULES) -> StrengthVerdict:
    """Classify a candidate by how many rules it satisfies.

    Thresholds are relative to the rule count: fewer than two passing rules
    is weak, all rules passing is strong, anything in between is medium.

    Examples:
        >>> strength("").level
        <StrengthLevel.NONE: 'none'>
        >>> strength("StrongPass123").label
        'Strong'

    """
    if not candidate:
        return _VERDICTS[StrengthLevel.NONE]

    passed = sum(1 for rule in rules if rule.test(candidate))

    if passed < 2:
        return _VERDICTS[StrengthLevel.WEAK]
    if passed < len(rules):
        return _VERDICTS[StrengthLevel.MEDIUM]
    return _VERDICTS[StrengthLevel.STRONG]

