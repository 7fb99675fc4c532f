"""
Password policy model.
A policy is the site-defined set of acceptance thresholds a password is checked against.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from typing import Any, Mapping, Optional
import logging

# Set up logging
logger = logging.getLogger(__name__)


def _clamp(value: int, minimum: int, maximum: int) -> int:
    return max(minimum, min(maximum, value))


class PasswordPolicy(BaseModel):
    """Immutable password acceptance thresholds."""

    model_config = ConfigDict(frozen=True)

    min_length: int = Field(default=10, ge=0, description="Minimum accepted character count")
    min_strength_score: int = Field(default=3, ge=0, le=4, description="Minimum accepted score")
    require_lowercase: bool = Field(default=True, description="Require an a-z character")
    require_uppercase: bool = Field(default=True, description="Require an A-Z character")
    require_digit: bool = Field(default=True, description="Require a 0-9 character")
    require_symbol: bool = Field(default=False, description="Require a symbol character")
    min_unique_chars: int = Field(default=6, ge=0, description="Minimum distinct-character count")
    block_weak_patterns: bool = Field(default=True, description="Toggle the pattern-based checks")

    @classmethod
    def from_partial(cls, data: Optional[Mapping[str, Any]]) -> "PasswordPolicy":
        """
        Build a policy from a possibly incomplete or malformed mapping.

        Every field that is missing or fails validation falls back to its
        default, so this never raises.

        Args:
            data: Raw policy values, e.g. a decoded JSON object

        Returns:
            PasswordPolicy with defaults filling the gaps
        """
        if not data:
            return DEFAULT_PASSWORD_POLICY

        values = {}
        for name in cls.model_fields:
            if name not in data:
                continue
            candidate = data[name]
            try:
                cls.model_validate({name: candidate})
            except ValidationError:
                logger.warning(f"Ignoring malformed password policy field '{name}', using default")
                continue
            values[name] = candidate

        return cls(**values)

    @classmethod
    def from_settings(cls, config) -> "PasswordPolicy":
        """
        Build the server policy from application settings.
        Numeric thresholds are clamped to sane operating ranges.
        """
        return cls(
            min_length=_clamp(config.auth_password_min_length, 8, 128),
            min_strength_score=_clamp(config.auth_password_min_strength_score, 1, 4),
            require_lowercase=config.auth_password_require_lowercase,
            require_uppercase=config.auth_password_require_uppercase,
            require_digit=config.auth_password_require_digit,
            require_symbol=config.auth_password_require_symbol,
            min_unique_chars=_clamp(config.auth_password_min_unique_chars, 1, 64),
            block_weak_patterns=config.auth_password_block_weak_patterns,
        )


# Policy used whenever the caller does not supply one
DEFAULT_PASSWORD_POLICY = PasswordPolicy()


class IdentityHints(BaseModel):
    """Identity values a password must not contain. Used for leak detection only."""
    username: Optional[str] = Field(None, max_length=256, description="Username for identity-leak detection")
    email: Optional[str] = Field(None, max_length=320, description="Email for identity-leak detection")
