"""Credential feedback router (form validation endpoints)."""

import logging

from fastapi import APIRouter, Depends, Request

from src.shared.rate_limiting.limiter import current_rate_limit, limiter
from src.shared.validators.password import Rule

from .dependencies import get_password_rules, get_rule_set_name
from .schemas import (
    EmailCheckRequest,
    FieldCheckResponse,
    LoginFormFeedback,
    LoginFormRequest,
    OTPCheckRequest,
    PasswordCheckRequest,
    PasswordEvaluationResponse,
    PasswordResetFormFeedback,
    PasswordResetFormRequest,
    PasswordRulesResponse,
)
from .service import CredentialService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/credentials", tags=["Credentials"])


@router.get("/password-rules", response_model=PasswordRulesResponse)
@limiter.limit(current_rate_limit)
async def get_password_rule_labels(
    request: Request,
    rules: tuple[Rule, ...] = Depends(get_password_rules),
    rule_set: str = Depends(get_rule_set_name),
):
    """List the password checklist labels in display order.

    - **rule_set**: Optional named rule set (standard, strict)
    """
    return PasswordRulesResponse(rule_set=rule_set, rules=[rule.label for rule in rules])


@router.post("/password/evaluate", response_model=PasswordEvaluationResponse)
@limiter.limit(current_rate_limit)
async def evaluate_password(
    request: Request,
    data: PasswordCheckRequest,
    rules: tuple[Rule, ...] = Depends(get_password_rules),
):
    """Evaluate a password against every rule and report its strength tier."""
    return CredentialService.evaluate_password(data.password, rules)


@router.post("/email/validate", response_model=FieldCheckResponse)
@limiter.limit(current_rate_limit)
async def validate_email(request: Request, data: EmailCheckRequest):
    """Check the shape of an email address."""
    return CredentialService.check_email(data.email)


@router.post("/otp/validate", response_model=FieldCheckResponse)
@limiter.limit(current_rate_limit)
async def validate_otp(request: Request, data: OTPCheckRequest):
    """Check that a one-time code is exactly four digits."""
    return CredentialService.check_otp(data.otp)


@router.post("/login/validate", response_model=LoginFormFeedback)
@limiter.limit(current_rate_limit)
async def validate_login_form(
    request: Request,
    data: LoginFormRequest,
    rules: tuple[Rule, ...] = Depends(get_password_rules),
):
    """Validate the login form and report per-field errors.

    - **email**: Email field value
    - **password**: Password field value

    Credentials are not checked against any account.
    """
    return CredentialService.login_feedback(data.email, data.password, rules)


@router.post("/password-reset/validate", response_model=PasswordResetFormFeedback)
@limiter.limit(current_rate_limit)
async def validate_password_reset_form(
    request: Request,
    data: PasswordResetFormRequest,
    rules: tuple[Rule, ...] = Depends(get_password_rules),
):
    """Validate the password reset form and report per-field errors.

    - **email**: Account email
    - **otp**: Four-digit code sent to the user
    - **new_password**: New password
    - **confirm_password**: Must match new_password
    """
    return CredentialService.password_reset_feedback(
        data.email,
        data.otp,
        data.new_password,
        data.confirm_password,
        rules,
    )
