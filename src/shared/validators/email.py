"""Email format validation."""

import re

# Browser "\s": unlike Python's, it includes U+FEFF and excludes \x1c-\x1f and \x85.
_WHITESPACE = (
    r"\t\n\v\f\r \N{NO-BREAK SPACE}\N{OGHAM SPACE MARK}\N{EN QUAD}-\N{HAIR SPACE}"
    r"\N{LINE SEPARATOR}\N{PARAGRAPH SEPARATOR}\N{NARROW NO-BREAK SPACE}"
    r"\N{MEDIUM MATHEMATICAL SPACE}\N{IDEOGRAPHIC SPACE}\N{ZERO WIDTH NO-BREAK SPACE}"
)
_SEGMENT = rf"[^{_WHITESPACE}@]+"

# Syntactic sanity check only: one "@", a dot in the domain, no whitespace.
EMAIL_PATTERN = re.compile(rf"{_SEGMENT}@{_SEGMENT}\.{_SEGMENT}")


def is_valid_email(candidate: str) -> bool:
    """Check that a string has the rough shape of an email address.

    This is not RFC 5322 validation. It blocks obviously malformed input
    (missing local part, missing domain, missing "@" or ".") and accepts
    some addresses a full grammar would reject, such as consecutive dots.

    Args:
        candidate: Raw user input

    Returns:
        True if the candidate matches the email shape

    Examples:
        >>> is_valid_email("test@example.com")
        True
        >>> is_valid_email("@example.com")
        False

    """
    return EMAIL_PATTERN.fullmatch(candidate) is not None
