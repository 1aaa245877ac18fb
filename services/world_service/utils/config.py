"""
Configuration Management
Environment-based configuration for the world service
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import structlog

logger = structlog.get_logger(__name__)


class WorldConfig(BaseSettings):
    """World Service Configuration"""

    # Service info
    service_name: str = "world-service"
    service_version: str = "1.0.0"

    # Payload returned by GET /api/World
    world_payload: str = "Hark"

    port: int = 5049

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False
    )

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError('Port must be between 1 and 65535')
        return v

    def log_config(self):
        """Log configuration"""
        logger.info(
            "World service configured",
            service=self.service_name,
            version=self.service_version,
            payload_length=len(self.world_payload),
            port=self.port
        )


_world_config: Optional[WorldConfig] = None


def get_world_config() -> WorldConfig:
    """Get world configuration instance"""
    global _world_config
    if _world_config is None:
        _world_config = WorldConfig()
    return _world_config
