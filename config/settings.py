from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import computed_field
from typing import List


class Settings(BaseSettings):
    # Web server
    host: str = "0.0.0.0"
    port: int = 5000

    # Database
    database_url: str = "sqlite+aiosqlite:///./car_rental.db"

    # Пользователи с правами администратора независимо от роли в БД
    admin_ids_str: str = ""

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/api.log"

    # Автоперезапуск в режиме разработки (dev_run.py)
    reload_paths_str: str = "api,config,database,services"
    reload_delay: float = 2.0

    @computed_field
    @property
    def admin_ids(self) -> List[int]:
        """Parse comma-separated admin IDs from environment variable"""
        if not self.admin_ids_str.strip():
            return []
        return [int(id.strip()) for id in self.admin_ids_str.split(",") if id.strip()]

    @computed_field
    @property
    def reload_paths(self) -> List[str]:
        """Каталоги, изменения в которых перезапускают сервер"""
        return [path.strip() for path in self.reload_paths_str.split(",") if path.strip()]

    # Порядок важен: сначала .env.local (для разработки), затем .env (продакшн)
    model_config = SettingsConfigDict(
        env_file=[".env.local", ".env"],
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()
