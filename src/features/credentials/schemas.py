"""Credential feedback schemas (DTOs)."""

from pydantic import BaseModel, Field

from src.shared.validators.password import RuleResult, StrengthVerdict


# Request schemas
class EmailCheckRequest(BaseModel):
    """Email field value to check."""

    email: str = Field("", description="Raw email input, may be empty")


class OTPCheckRequest(BaseModel):
    """One-time code field value to check."""

    otp: str = Field("", description="Raw code input, may be empty")


class PasswordCheckRequest(BaseModel):
    """Password field value to evaluate."""

    password: str = Field("", description="Raw password input, may be empty")


class LoginFormRequest(BaseModel):
    """Current state of the login form."""

    email: str = ""
    password: str = ""


class PasswordResetFormRequest(BaseModel):
    """Current state of the password reset form."""

    email: str = ""
    otp: str = ""
    new_password: str = ""
    confirm_password: str = ""


# Response schemas
class FieldCheckResponse(BaseModel):
    """Validity of a single field and the message to show when invalid."""

    valid: bool
    error: str = ""


class PasswordRulesResponse(BaseModel):
    """Checklist labels for the active rule set."""

    rule_set: str
    rules: list[str]


class PasswordEvaluationResponse(BaseModel):
    """Per-rule checklist state and overall strength."""

    checks: list[RuleResult]
    strength: StrengthVerdict


class LoginFormFeedback(BaseModel):
    """Everything the login form needs to render errors and enable submit."""

    email_error: str
    password_error: str
    password_checks: list[RuleResult]
    strength: StrengthVerdict
    is_form_valid: bool


class PasswordResetFormFeedback(BaseModel):
    """Everything the password reset form needs to render errors and enable submit."""

    email_error: str
    otp_error: str
    password_error: str
    confirm_password_error: str
    password_checks: list[RuleResult]
    strength: StrengthVerdict
    is_form_valid: bool
