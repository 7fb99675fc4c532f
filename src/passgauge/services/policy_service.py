"""
Password policy service: serves the configured policy and decides acceptance.
The strength evaluator is advisory; this service is the authority that turns a
report into an accept/reject decision.
"""

from typing import List, Optional, Tuple
import logging

from passgauge.core.config import settings
from passgauge.models.policy import PasswordPolicy
from passgauge.models.report import StrengthReport
from passgauge.services.strength_service import strength_service

# Set up logging
logger = logging.getLogger(__name__)


class PolicyService:
    """Service for password policy lookup and enforcement."""

    @staticmethod
    def get_policy() -> PasswordPolicy:
        """Current server policy built from settings."""
        return PasswordPolicy.from_settings(settings)

    @staticmethod
    def evaluate(
        password: str,
        policy: Optional[PasswordPolicy] = None,
        username: Optional[str] = None,
        email: Optional[str] = None
    ) -> StrengthReport:
        """Evaluate with the configured crack-time estimator constants."""
        return strength_service.evaluate(
            password,
            policy,
            username,
            email,
            guesses_per_second=settings.strength_guesses_per_second,
            entropy_cap_bits=settings.strength_entropy_cap_bits,
        )

    @staticmethod
    def policy_errors(report: StrengthReport, policy: PasswordPolicy) -> List[str]:
        """Human-readable reasons the report does not satisfy the policy."""
        errors = []
        checks = report.checks

        if not checks.length:
            errors.append(f"Password must be at least {policy.min_length} characters")
        if not checks.lowercase:
            errors.append("Password must include lowercase letters")
        if not checks.uppercase:
            errors.append("Password must include uppercase letters")
        if not checks.digit:
            errors.append("Password must include digits")
        if not checks.symbol:
            errors.append("Password must include symbols")
        if not checks.unique:
            errors.append(f"Password must include at least {policy.min_unique_chars} unique characters")
        if not checks.no_whitespace:
            errors.append("Password must not contain whitespace")
        if not checks.no_weak_pattern:
            errors.append("Password contains weak or common patterns")
        if not checks.no_sequence:
            errors.append("Password contains sequential character runs")
        if not checks.no_repeating_runs:
            errors.append("Password contains repeated character runs")
        if not checks.no_identity_contains:
            errors.append("Password must not contain username or email local-part")

        if report.score < policy.min_strength_score:
            errors.append(
                f"Password strength score is {report.score} but minimum required score is "
                f"{policy.min_strength_score}"
            )

        return errors

    @staticmethod
    def enforce(
        password: str,
        policy: Optional[PasswordPolicy] = None,
        username: Optional[str] = None,
        email: Optional[str] = None
    ) -> Tuple[bool, List[str]]:
        """
        Check a password against the policy.

        Args:
            password: Candidate password
            policy: Policy to enforce (defaults to the server policy)
            username: Optional username for identity-leak detection
            email: Optional email for identity-leak detection

        Returns:
            Tuple of (is_valid, list of error messages)
        """
        if policy is None:
            policy = PolicyService.get_policy()

        report = PolicyService.evaluate(password, policy, username, email)
        errors = PolicyService.policy_errors(report, policy)

        if errors:
            logger.info(
                f"Password rejected by policy: score={report.score} "
                f"failed_checks={report.checks.failed()}"
            )

        return len(errors) == 0, errors

# Global policy service instance
policy_service = PolicyService()
