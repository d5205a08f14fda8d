from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    host: str = "127.0.0.1"
    port: int = 8002

    # Matching
    match_threshold: float = 0.5
    # Lowercase product manufacturer → name used when indexing
    manufacturer_aliases: dict[str, str] = {"fujifilm": "fuji"}

    # Log
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
