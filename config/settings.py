"""Application settings using Pydantic Settings."""

from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    # Database Configuration
    mongodb_url: str
    db_name: str = "healthconnect"
    
    # OpenAI Configuration
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    
    # Mail relay (Gmail app password by default)
    email_user: str = ""
    email_pass: str = ""
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    
    # Application Configuration
    app_name: str = "HealthConnect API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    
    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 5000
    
    # CORS Configuration
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:3002"]
    
    # Frontend bundle
    static_dir: str = "public"
    
    # Sign-in echoes the stored user document, hash included unless disabled
    signin_include_password_hash: bool = True
    
    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
