from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    preserve_formatting: bool = True
    ignore_tags: str = ""
    wrap_words: int = 0
    wrap_length: int = 0

    max_input_chars: int = 1_000_000

    @property
    def ignore_tag_list(self) -> list[str]:
        return [tag.strip().lower() for tag in self.ignore_tags.split(",") if tag.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
