"""
Pydantic schemas for request/response validation in password endpoints.
These schemas define the structure of data sent to and from the API.
"""

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
from datetime import datetime, timezone
from passgauge.models.policy import IdentityHints, PasswordPolicy
from passgauge.models.report import StrengthReport

# Request Schemas (Data coming from client)

class PasswordStrengthRequest(IdentityHints):
    """Schema for password strength evaluation request."""
    password: str = Field(..., max_length=1024, description="Candidate password")
    policy: Optional[Dict[str, Any]] = Field(
        None, description="Policy override; missing or malformed fields use defaults"
    )

class PasswordCheckRequest(IdentityHints):
    """Schema for password acceptance check against the server policy."""
    password: str = Field(..., max_length=1024, description="Candidate password")

# Response Schemas (Data sent to client)

class PasswordPolicyResponse(BaseModel):
    """Schema for the current password policy."""
    policy: PasswordPolicy = Field(..., description="Password acceptance thresholds")

class PasswordStrengthResponse(BaseModel):
    """Schema for password strength evaluation response."""
    report: StrengthReport = Field(..., description="Strength verdict")
    crack_time_display: str = Field(..., description="Crack time as a single whole unit, e.g. '3d'")
    meets_policy: bool = Field(..., description="Whether the password satisfies the evaluated policy")
    errors: List[str] = Field(..., description="List of policy violations")

class MessageResponse(BaseModel):
    """Schema for simple message responses."""
    message: str = Field(..., description="Response message")
    success: bool = Field(default=True, description="Operation success status")

class PolicyErrorDetail(BaseModel):
    """Schema for the detail of a policy rejection."""
    message: str = Field(..., description="Error message")
    errors: List[str] = Field(..., description="List of policy violations")

class ErrorResponse(BaseModel):
    """Schema for policy rejection responses."""
    detail: PolicyErrorDetail = Field(..., description="Rejection details")

# Health check schema
class HealthCheckResponse(BaseModel):
    """Schema for health check endpoint."""
    status: str = Field(default="healthy", description="Service status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp"
    )
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
