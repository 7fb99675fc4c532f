"""
Password policy routes: policy lookup, advisory strength checks and acceptance checks.
"""

from fastapi import APIRouter, Depends, status
from passgauge.controllers.password_controller import PasswordController
from passgauge.controllers.schemas import (
    ErrorResponse,
    MessageResponse,
    PasswordCheckRequest,
    PasswordPolicyResponse,
    PasswordStrengthRequest,
    PasswordStrengthResponse,
)
from passgauge.models.policy import PasswordPolicy
from passgauge.utils.dependencies import get_password_policy
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Password Policy"])

@router.get("/password-policy", response_model=PasswordPolicyResponse)
async def get_password_policy_route(policy: PasswordPolicy = Depends(get_password_policy)):
    """Current password policy for client-side strength meters."""
    return await PasswordController.get_policy(policy)

@router.post("/password-strength", response_model=PasswordStrengthResponse)
async def password_strength(
    data: PasswordStrengthRequest,
    policy: PasswordPolicy = Depends(get_password_policy)
):
    """Advisory strength report. Never rejects the password."""
    return await PasswordController.check_strength(data, policy)

@router.post(
    "/password-check",
    response_model=MessageResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
)
async def password_check(
    data: PasswordCheckRequest,
    policy: PasswordPolicy = Depends(get_password_policy)
):
    """Accept or reject a password against the server policy."""
    return await PasswordController.validate_password(data, policy)
