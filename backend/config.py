# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./symi.db"

    # Root folder for uploaded assets (img/ and doc/ live below it)
    STORAGE_DIR: str = "storage"
    MAX_UPLOAD_MB: int = 50

    HOST: str = "0.0.0.0"
    PORT: int = 3005
    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 720

    # Account created on first boot when the users table is empty
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin"

    # Reject status changes that are not in the workflow adjacency set
    ENFORCE_WORKFLOW_ORDER: bool = False
    # Terminate the process after a backup import so the supervisor restarts it
    RESTART_AFTER_RESTORE: bool = False

    class Config:
        env_file: ClassVar[str] = str(env_path)

    @property
    def storage_path(self) -> Path:
        return Path(self.STORAGE_DIR)

    @property
    def image_dir(self) -> Path:
        return self.storage_path / "img"

    @property
    def document_dir(self) -> Path:
        return self.storage_path / "doc"

settings = Settings()
