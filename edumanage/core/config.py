# edumanage/core/config.py
"""Application configuration using Pydantic."""
from pydantic_settings import BaseSettings
from typing import Optional

class Settings(BaseSettings):
    # Required: the process refuses to start without a database
    database_url: str
    redis_url: Optional[str] = None

    app_name: str = 'EduManage API'
    app_version: str = '1.0.0'
    environment: str = 'development'
    log_level: str = 'info'

    static_dir: str = 'dist/public'
    app_data_dir: str = 'data'
    dashboard_cache_ttl: int = 60
    create_tables: bool = False

    model_config = {
        'env_file': '.env',
        'extra': 'ignore'
    }

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == 'production'

settings = Settings()
