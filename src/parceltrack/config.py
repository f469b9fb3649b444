from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: str = "./data"
    delay_check_interval_seconds: int = 60
    scheduler_enabled: bool = True
    seed_sample_data: bool = True

    model_config = {"env_prefix": "PARCELTRACK_"}


settings = Settings()
