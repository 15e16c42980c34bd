"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, rulecheck.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from rulecheck.domain.password import DEFAULT_MIN_LENGTH

# --- rulecheck.toml sections ---


class PasswordPolicyConfig(BaseModel):
    """[password] section."""

    model_config = {"frozen": True}

    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    require_digit: bool = True
    require_mixed_case: bool = True


class RulecheckConfig(BaseModel):
    """Root configuration composing all sections.

    Used to validate the section tables of rulecheck.toml before they
    reach the settings merge.
    """

    model_config = {"frozen": True}

    password: PasswordPolicyConfig = Field(default_factory=PasswordPolicyConfig)
