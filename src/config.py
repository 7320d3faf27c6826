from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "SEO King"
    debug: bool = False
    log_level: str = "info"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False

    streamlit_port: int = 8501

    max_upload_files: int = 20


settings = Settings()
