from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    code_version: str = "v1.0.0"
    cors_origins: str = "http://localhost:5173,http://localhost:3000,http://127.0.0.1:5173,http://127.0.0.1:3000,*"
    log_level: str = "INFO"

    # Anomaly threshold in percentage points
    default_threshold: float = 5.0
    min_sample_size: int = 10

    # Synthetic data generation bounds
    min_record_count: int = 10
    max_record_count: int = 10000
    default_record_count: int = 500

    class Config:
        env_file = ".env"


settings = Settings()
