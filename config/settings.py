from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False
    log_dir: str = "logs"

    # Pump.fun Global account decoding
    pumpfun_strict_bool_decode: bool = True  # reject initialized byte other than 0/1


settings = Settings()
