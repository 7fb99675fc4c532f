"""
API router: mounts the versioned password routes.
"""

from fastapi import APIRouter

from passgauge.api.password_routes import router as password_router

# Create main router
router = APIRouter()

# Include password routes
router.include_router(password_router, prefix="/v1")

@router.get("/")
async def api_root():
    return {
        "message": "PassGauge API",
        "version": "1.0.0",
        "endpoints": [
            "/v1/auth/password-policy",
            "/v1/auth/password-strength",
            "/v1/auth/password-check"
        ]
    }
