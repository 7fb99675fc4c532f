"""
Configuration management for the password strength service.
This file loads environment variables and provides a centralized config object.
"""

from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable (1/true/yes/on, case-insensitive)."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Pydantic automatically validates types and provides defaults.
    """
    
    # Application Configuration
    app_name: str = os.getenv("APP_NAME", "PassGauge")
    api_url: str = os.getenv("API_URL", "http://localhost:8000")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    
    # Password Policy Configuration (served to clients and used for acceptance checks)
    auth_password_min_length: int = int(os.getenv("AUTH_PASSWORD_MIN_LENGTH", 10))
    auth_password_min_strength_score: int = int(os.getenv("AUTH_PASSWORD_MIN_STRENGTH_SCORE", 3))
    auth_password_min_unique_chars: int = int(os.getenv("AUTH_PASSWORD_MIN_UNIQUE_CHARS", 6))
    auth_password_require_lowercase: bool = env_flag("AUTH_PASSWORD_REQUIRE_LOWERCASE", True)
    auth_password_require_uppercase: bool = env_flag("AUTH_PASSWORD_REQUIRE_UPPERCASE", True)
    auth_password_require_digit: bool = env_flag("AUTH_PASSWORD_REQUIRE_DIGIT", True)
    auth_password_require_symbol: bool = env_flag("AUTH_PASSWORD_REQUIRE_SYMBOL", False)
    auth_password_block_weak_patterns: bool = env_flag("AUTH_PASSWORD_BLOCK_WEAK_PATTERNS", True)
    
    # Crack-time Estimator Configuration
    strength_guesses_per_second: float = float(os.getenv("STRENGTH_GUESSES_PER_SECOND", 1e10))
    strength_entropy_cap_bits: float = float(os.getenv("STRENGTH_ENTROPY_CAP_BITS", 80))

# Create global settings instance that can be imported throughout the app
settings = Settings()
