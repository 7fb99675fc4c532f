"""
Strength report models returned by the evaluator.
Attributes are snake_case in Python and serialize with camelCase names.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class StrengthChecks(BaseModel):
    """Per-rule results. True means the policy is satisfied on that axis."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    length: bool
    lowercase: bool
    uppercase: bool
    digit: bool
    symbol: bool
    unique: bool
    no_whitespace: bool
    no_weak_pattern: bool
    no_sequence: bool
    no_repeating_runs: bool
    no_identity_contains: bool

    def failed(self) -> list[str]:
        """Names of the checks that did not pass, in declaration order."""
        return [name for name, passed in self if not passed]


class StrengthReport(BaseModel):
    """Strength verdict for a single password."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    score: int = Field(..., ge=0, le=4, description="Coarse strength bucket")
    entropy_bits: float = Field(..., ge=0, description="Estimated information content in bits")
    crack_time_seconds: float = Field(..., ge=0, description="Estimated offline attack time in seconds")
    checks: StrengthChecks
