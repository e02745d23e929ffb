"""Shared validators package for the application.

This package contains the credential-input validation engine used by the
login and password reset forms. Every function here is pure and total over
strings: failures are reported as False or failing rule results, never
raised.

Available validators:
- email.py: Email shape check
- password.py: Password rule sets, checklist evaluation and strength tiers
- otp.py: Fixed-length numeric one-time code check
"""

from .email import is_valid_email
from .otp import OTP_LENGTH, is_valid_otp
from .password import (
    PASSWORD_RULES,
    STRICT_PASSWORD_RULES,
    Rule,
    RuleResult,
    StrengthLevel,
    StrengthVerdict,
    evaluate,
    get_rule_set,
    strength,
)

__all__ = [
    "OTP_LENGTH",
    "PASSWORD_RULES",
    "STRICT_PASSWORD_RULES",
    "Rule",
    "RuleResult",
    "StrengthLevel",
    "StrengthVerdict",
    "evaluate",
    "get_rule_set",
    "is_valid_email",
    "is_valid_otp",
    "strength",
]
