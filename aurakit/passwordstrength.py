"""Measuring the strength of a password."""

from __future__ import annotations

from enum import IntEnum


class PasswordStrength(IntEnum):
    """Strengths of a password, weakest first."""

    BLANK = 0
    VERY_WEAK = 1
    WEAK = 2
    MEDIUM = 3
    STRONG = 4
    VERY_STRONG = 5


def password_strength(password: str) -> PasswordStrength:
    """Rate a password by its length and the kinds of characters it holds."""
    if not password:
        return PasswordStrength.BLANK
    if len(password) < 6:
        return PasswordStrength.VERY_WEAK
    score = 1
    score += len(password) >= 8
    score += len(password) >= 12
    score += any(c.isdigit() for c in password)
    score += any(c.islower() for c in password) and any(c.isupper() for c in password)
    score += any(not c.isalnum() for c in password)
    return PasswordStrength(min(score, PasswordStrength.VERY_STRONG))