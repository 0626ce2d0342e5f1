"""Configuration management for the letter intake pipeline."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "patra"
    postgres_password: str = "localdev"
    postgres_db: str = "patra"

    # OCR
    ocr_language: str = "mar+eng"
    render_dpi: int = 300
    tesseract_psm: int = 6

    # Extraction
    date_years_back: int = 10
    date_years_ahead: int = 1
    max_recipients: int = 8
    remarks_max_length: int = 300

    # Storage
    upload_dir: str = "uploads"

    # Logging
    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        """Construct async database URL."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
