"""One-time code validation."""

import re

OTP_LENGTH = 4
OTP_PATTERN = re.compile(rf"[0-9]{{{OTP_LENGTH}}}")


def is_valid_otp(candidate: str) -> bool:
    """Check that a string is exactly four ASCII digits."""
    return OTP_PATTERN.fullmatch(candidate) is not None
