"""Credential feedback dependencies for FastAPI."""

from fastapi import Depends, Query

from src.config.settings import settings
from src.shared.validators.password import RULE_SETS, Rule, UnknownRuleSetError, get_rule_set

from .exceptions import UnknownRuleSetException

CUSTOM_RULE_SET = "custom"


def get_rule_set_name(
    rule_set: str | None = Query(None, description="Named password rule set, defaults to the configured policy"),
) -> str:
    """Name of the rule set a request asked for, or the configured one.

    An explicit PASSWORD_RULES key list in settings is reported as "custom".
    """
    if rule_set is not None:
        return rule_set.lower()
    if settings.password_rules:
        return CUSTOM_RULE_SET
    return settings.password_rule_set


def get_password_rules(rule_set: str = Depends(get_rule_set_name)) -> tuple[Rule, ...]:
    """Resolve the password rule set for a request.

    Raises:
        UnknownRuleSetException: If the requested rule set does not exist

    """
    if rule_set == CUSTOM_RULE_SET and settings.password_rules:
        return settings.get_password_rules()
    try:
        return get_rule_set(rule_set)
    except UnknownRuleSetError as err:
        raise UnknownRuleSetException(rule_set, sorted(RULE_SETS)) from err
