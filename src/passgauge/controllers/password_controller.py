"""
Password controller containing the password policy business logic.
This handles policy lookup, advisory strength evaluation and acceptance checks.
"""

from fastapi import HTTPException, status
from passgauge.controllers.schemas import (
    MessageResponse,
    PasswordCheckRequest,
    PasswordPolicyResponse,
    PasswordStrengthRequest,
    PasswordStrengthResponse,
)
from passgauge.models.policy import PasswordPolicy
from passgauge.services.policy_service import policy_service
from passgauge.services.time_format_service import format_crack_time
import logging

# Set up logging
logger = logging.getLogger(__name__)

class PasswordController:
    """
    Controller class for password policy operations.
    Passwords are evaluated in memory and never stored or echoed back.
    """

    @staticmethod
    async def get_policy(policy: PasswordPolicy) -> PasswordPolicyResponse:
        """Return the policy clients should evaluate against."""
        return PasswordPolicyResponse(policy=policy)

    @staticmethod
    async def check_strength(
        data: PasswordStrengthRequest,
        server_policy: PasswordPolicy
    ) -> PasswordStrengthResponse:
        """
        Evaluate a password without accepting or rejecting it.

        Args:
            data: Password, identity hints and optional policy override
            server_policy: Policy used when the request carries no override

        Returns:
            Strength report with formatted crack time and policy errors
        """
        policy = PasswordPolicy.from_partial(data.policy) if data.policy else server_policy

        report = policy_service.evaluate(data.password, policy, data.username, data.email)
        errors = policy_service.policy_errors(report, policy)

        return PasswordStrengthResponse(
            report=report,
            crack_time_display=format_crack_time(report.crack_time_seconds),
            meets_policy=len(errors) == 0,
            errors=errors,
        )

    @staticmethod
    async def validate_password(
        data: PasswordCheckRequest,
        server_policy: PasswordPolicy
    ) -> MessageResponse:
        """
        Enforce the server policy.

        Raises:
            HTTPException: If the password does not meet the policy
        """
        is_valid, errors = policy_service.enforce(
            data.password, server_policy, data.username, data.email
        )
        if not is_valid:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={
                    "message": "Password does not meet security requirements",
                    "errors": errors
                }
            )

        return MessageResponse(message="Password meets security requirements")
