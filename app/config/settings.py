# app/config/settings.py
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    # App Info
    app_name: str = "HurayraXpress API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: List[str] = ["*"]

    # Document store
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "hurayra_xpress"
    mongodb_timeout_ms: int = 5000
    mongodb_ping_on_startup: bool = True

    # Payment gateway
    stripe_secret_key: Optional[str] = None
    stripe_currency: str = "usd"

    # Identity provider (base64-encoded service account JSON)
    fb_service_key: Optional[str] = None

    # Image store
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_api_key: Optional[str] = None
    cloudinary_api_secret: Optional[str] = None
    cloudinary_folder: str = "hurayra_xpress"

    # File Upload
    max_image_size: int = 10 * 1024 * 1024

    @property
    def stripe_configured(self) -> bool:
        return bool(self.stripe_secret_key)

    @property
    def auth_configured(self) -> bool:
        return bool(self.fb_service_key)

    @property
    def cloudinary_configured(self) -> bool:
        return all([self.cloudinary_cloud_name, self.cloudinary_api_key, self.cloudinary_api_secret])

    @property
    def mongodb_host(self) -> str:
        """Host part of the connection string, without credentials"""
        if "@" in self.mongodb_uri:
            return self.mongodb_uri.split("@", 1)[1].split("/", 1)[0]
        return self.mongodb_uri.split("://", 1)[-1].split("/", 1)[0]

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'


settings = Settings()
