from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    rental_api_base_url: str = "http://localhost:8080/v1/api"
    rental_api_timeout: float = 30.0
    log_level: str = "INFO"
