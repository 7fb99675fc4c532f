"""
FastAPI app for the password strength and policy service.
"""

from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from passgauge.api.routes import router as api_router
from passgauge.controllers.schemas import HealthCheckResponse
from passgauge.core.config import settings
from passgauge.services.policy_service import policy_service
import logging

# Set up logging
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger(__name__)

APP_VERSION = "1.0.0"

# Create FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="""
    ## Password Strength & Policy Service
    
    ### Features:
    * **Strength Reports**: 0-4 score, entropy estimate and offline crack-time estimate
    * **Per-rule Checklist**: eleven pass/fail checks against the site policy
    * **Identity Leak Detection**: flags passwords containing the username or email
    * **Policy Enforcement**: server-side accept/reject with readable reasons
    
    Passwords are evaluated in memory only. Nothing is stored or logged.
    """,
    version=APP_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unexpected error in {request.method} {request.url.path}: {type(exc).__name__}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Unexpected server error"}
    )

@app.on_event("startup")
async def startup_event():
    """Log the active policy."""
    logger.info(f"Starting {settings.app_name} API...")
    policy = policy_service.get_policy()
    logger.info(f"Active password policy: {policy.model_dump()}")

# Root endpoint
@app.get("/")
async def root():
    """Root endpoint with service info."""
    return {
        "message": f"{settings.app_name} password strength service",
        "version": APP_VERSION,
        "docs": "/docs",
        "endpoints": [
            "GET /api/v1/auth/password-policy - Current password policy",
            "POST /api/v1/auth/password-strength - Advisory strength report",
            "POST /api/v1/auth/password-check - Accept or reject against the policy"
        ]
    }

@app.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """Health check."""
    return HealthCheckResponse(service="passgauge-backend", version=APP_VERSION)

# Include API routes
app.include_router(api_router, prefix="/api")
