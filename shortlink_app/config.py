from pydantic_settings import BaseSettings, SettingsConfigDict
import string


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment
    environment: str = "development"
    debug: bool = True
    
    # Application
    app_name: str = "Link Shortener"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    
    # Database
    database_url: str = "sqlite:///./links.db"
    
    # Short links are "<base_url>/<short_code>"; empty means relative links
    base_url: str = ""
    
    # Short code generation
    short_code_length: int = 6
    short_code_alphabet: str = string.ascii_letters + string.digits
    short_code_max_attempts: int = 10  # Collisions tolerated per length before widening
    short_code_max_length: int = 10
    
    # Custom aliases are accepted as-is unless the format check is switched on
    enforce_custom_code_format: bool = False
    custom_code_pattern: str = r"^[A-Za-z0-9]{6,8}$"
    
    # Logging
    log_level: str = "INFO"
    
    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
