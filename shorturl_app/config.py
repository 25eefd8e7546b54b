from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"
    debug: bool = False
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    
    # URL Shortener specific
    base_url: str = "http://localhost:8080"
    short_url_length: int = 6  # Characters in every generated token
    short_url_bytes: int = 6  # Random bytes drawn per urlsafe token
    
    # Short code generation strategy
    short_code_strategy: str = "urlsafe"  # Options: "urlsafe", "base62"
    
    # Address store settings
    store_backend: str = "memory"  # Options: "memory"
    
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
