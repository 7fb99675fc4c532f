"""
FastAPI dependencies for password policy routes.
"""

from passgauge.models.policy import PasswordPolicy
from passgauge.services.policy_service import policy_service

async def get_password_policy() -> PasswordPolicy:
    """
    Dependency that supplies the current server password policy.
    Override it in tests with app.dependency_overrides.
    
    Returns:
        PasswordPolicy built from settings
    """
    return policy_service.get_policy()
