from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PORT: int = 3000
    HOST: str = "0.0.0.0"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["*"]
    CONTACTS_FILE: str = "contacts.json"
    UPLOAD_DIR: str = "uploads"
    UPLOAD_URL_PREFIX: str = "/uploads"
    MAX_UPLOAD_BYTES: int = 10 * 1024 * 1024
    PUBLIC_DIR: str = "public"
    CURRENCY: str = "KSH"
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_SECURE: bool = False
    SMTP_USER: str = ""
    SMTP_PASS: str = ""
    SMTP_FROM: Optional[str] = None
    ADMIN_EMAIL: Optional[str] = None
    VALIDATE_CERTS: bool = True

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def smtp_enabled(self) -> bool:
        """Mail notifications are on only with a relay host and credentials"""
        return bool(self.SMTP_HOST and self.SMTP_USER and self.SMTP_PASS)


settings = Settings()
