"""
Configuration Management
Environment-based configuration for the hello service and its upstream
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import structlog

logger = structlog.get_logger(__name__)


class RelayConfig(BaseSettings):
    """Hello Service Configuration"""

    # Service info
    service_name: str = "hello-service"
    service_version: str = "1.0.0"
    port: int = 5278

    # Upstream world service
    world_service_url: str = "http://localhost:5049"
    world_service_timeout: float = 10.0
    world_service_connect_timeout: float = 5.0

    # Browser origin allowed to call this service
    cors_allowed_origin: str = "http://localhost:3000"

    # How often a pending upstream call checks for a gone caller
    disconnect_poll_interval: float = 0.1

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False
    )

    @field_validator('world_service_url')
    @classmethod
    def validate_world_service_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('World service URL must start with http:// or https://')
        return v.rstrip('/')

    @field_validator('world_service_timeout', 'world_service_connect_timeout', 'disconnect_poll_interval')
    @classmethod
    def validate_positive(cls, v):
        if v <= 0:
            raise ValueError('Timeouts and intervals must be greater than zero')
        return v

    @field_validator('cors_allowed_origin')
    @classmethod
    def validate_cors_origin(cls, v):
        v = v.strip().rstrip('/')
        if not v or '*' in v:
            raise ValueError('CORS origin must be a single explicit origin')
        return v

    def log_config(self):
        """Log configuration"""
        logger.info(
            "Hello service configured",
            world_service_url=self.world_service_url,
            timeout=self.world_service_timeout,
            connect_timeout=self.world_service_connect_timeout,
            cors_origin=self.cors_allowed_origin
        )


_relay_config: Optional[RelayConfig] = None


def get_relay_config() -> RelayConfig:
    """Get relay configuration instance"""
    global _relay_config
    if _relay_config is None:
        _relay_config = RelayConfig()
    return _relay_config
