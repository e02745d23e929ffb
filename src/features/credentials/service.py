"""Credential feedback service layer.

Turns raw validator output into the per-field messages and submit state the
login and password reset forms render.
"""

import logging
from collections.abc import Sequence

from src.shared.validators.email import is_valid_email
from src.shared.validators.otp import OTP_LENGTH, is_valid_otp
from src.shared.validators.password import Rule, RuleResult, evaluate, strength

from .schemas import (
    FieldCheckResponse,
    LoginFormFeedback,
    PasswordEvaluationResponse,
    PasswordResetFormFeedback,
)

logger = logging.getLogger(__name__)

EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Enter a valid email address"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_REQUIREMENTS_UNMET = "Please satisfy all password requirements"
OTP_REQUIRED = "Code is required"
OTP_INVALID = f"Enter the {OTP_LENGTH}-digit code"
CONFIRM_PASSWORD_REQUIRED = "Please confirm your password"
PASSWORDS_DO_NOT_MATCH = "Passwords do not match"


class CredentialService:
    """Service for building form feedback from the credential validators."""

    @staticmethod
    def email_error(email: str) -> str:
        """Message for the email field, empty when valid."""
        if not email:
            return EMAIL_REQUIRED
        if not is_valid_email(email):
            return EMAIL_INVALID
        return ""

    @staticmethod
    def otp_error(otp: str) -> str:
        """Message for the one-time code field, empty when valid."""
        if not otp:
            return OTP_REQUIRED
        if not is_valid_otp(otp):
            return OTP_INVALID
        return ""

    @staticmethod
    def password_error(password: str, checks: list[RuleResult]) -> str:
        """Message for the password field given its already evaluated checklist."""
        if not password:
            return PASSWORD_REQUIRED
        if any(not check.passed for check in checks):
            return PASSWORD_REQUIREMENTS_UNMET
        return ""

    @staticmethod
    def confirm_password_error(password: str, confirm_password: str) -> str:
        """Message for the confirmation field, empty when it matches."""
        if not confirm_password:
            return CONFIRM_PASSWORD_REQUIRED
        if confirm_password != password:
            return PASSWORDS_DO_NOT_MATCH
        return ""

    @staticmethod
    def check_email(email: str) -> FieldCheckResponse:
        error = CredentialService.email_error(email)
        return FieldCheckResponse(valid=not error, error=error)

    @staticmethod
    def check_otp(otp: str) -> FieldCheckResponse:
        error = CredentialService.otp_error(otp)
        return FieldCheckResponse(valid=not error, error=error)

    @staticmethod
    def evaluate_password(password: str, rules: Sequence[Rule]) -> PasswordEvaluationResponse:
        """Evaluate the checklist and strength tier for a password."""
        verdict = strength(password, rules)
        logger.debug(f"Password evaluated against {len(rules)} rules: {verdict.level}")
        return PasswordEvaluationResponse(checks=evaluate(password, rules), strength=verdict)

    @staticmethod
    def login_feedback(email: str, password: str, rules: Sequence[Rule]) -> LoginFormFeedback:
        """Build login form feedback.

        Args:
            email: Email field value
            password: Password field value
            rules: Password rule set driving the checklist

        Returns:
            Field errors, checklist, strength and whether submit is allowed

        """
        checks = evaluate(password, rules)
        email_error = CredentialService.email_error(email)
        password_error = CredentialService.password_error(password, checks)
        is_form_valid = not email_error and not password_error

        logger.debug(f"Login form checked: valid={is_form_valid}")
        return LoginFormFeedback(
            email_error=email_error,
            password_error=password_error,
            password_checks=checks,
            strength=strength(password, rules),
            is_form_valid=is_form_valid,
        )

    @staticmethod
    def password_reset_feedback(
        email: str,
        otp: str,
        new_password: str,
        confirm_password: str,
        rules: Sequence[Rule],
    ) -> PasswordResetFormFeedback:
        """Build password reset form feedback (email, code, new password, confirmation)."""
        checks = evaluate(new_password, rules)
        errors = {
            "email_error": CredentialService.email_error(email),
            "otp_error": CredentialService.otp_error(otp),
            "password_error": CredentialService.password_error(new_password, checks),
            "confirm_password_error": CredentialService.confirm_password_error(new_password, confirm_password),
        }
        is_form_valid = not any(errors.values())

        logger.debug(f"Password reset form checked: valid={is_form_valid}")
        return PasswordResetFormFeedback(
            **errors,
            password_checks=checks,
            strength=strength(new_password, rules),
            is_form_valid=is_form_valid,
        )
