# Burndown Service Configuration
"""
Configuration management for Burndown Service.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Burndown Service settings."""
    
    # Service settings
    service_name: str = "Burndown Service"
    service_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server settings
    host: str = "0.0.0.0"
    port: int = 8002
    
    # External data store
    data_store_url: str = "http://localhost:8001"
    request_timeout: float = 30.0  # seconds
    max_retries: int = 3
    retry_delay: float = 1.0  # seconds, doubled per attempt
    
    # Projection settings
    timezone: str = "UTC"
    min_timeframe_days: int = 7
    default_timeframe_days: int = 21
    default_total_scope: float = 100
    date_label_format: str = "%b %d"
    
    class Config:
        env_prefix = "BURNDOWN_"
        env_file = ".env"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
