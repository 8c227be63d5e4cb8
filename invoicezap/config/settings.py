
from pydantic_settings import BaseSettings


class Settings(BaseSettings):

    # Recommendations
    scoring_config_path: str = "scoring_config.json"
    recommendation_limit: int = 5

    # Template ids
    id_suffix_length: int = 6

    log_level: str = "INFO"

    class Config:
        env_prefix = "INVOICEZAP_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
