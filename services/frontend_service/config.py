"""
Configuration Management
Environment-based configuration for the frontend service
"""

import logging
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

logger = logging.getLogger(__name__)


class FrontendConfig(BaseSettings):
    """Frontend Service Configuration"""

    service_name: str = "frontend-service"
    service_version: str = "1.0.0"
    environment: str = "development"
    port: int = 3000
    debug: bool = False

    # Hello service the page talks to
    hello_service_url: str = "http://localhost:5278"
    # Stays above the hello service deadline so its 504 reaches the page
    hello_service_timeout: float = 15.0

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False
    )

    @field_validator('hello_service_url')
    @classmethod
    def validate_hello_service_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('Hello service URL must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('hello_service_timeout')
    @classmethod
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError('Hello service timeout must be greater than zero')
        return v

    def log_config(self):
        """Log configuration"""
        logger.info(f"Hello service: {self.hello_service_url} (timeout {self.hello_service_timeout}s)")
        logger.info(f"Environment: {self.environment}")


_frontend_config: Optional[FrontendConfig] = None


def get_frontend_config() -> FrontendConfig:
    """Get frontend configuration instance"""
    global _frontend_config
    if _frontend_config is None:
        _frontend_config = FrontendConfig()
    return _frontend_config
