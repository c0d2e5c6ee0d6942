from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content store
    POSTS_DIRECTORY: str = "posts"
    POST_EXTENSIONS: List[str] = [".md"]

    # Rendering
    MARKDOWN_EXTENSIONS: List[str] = ["fenced_code", "tables"]

    # Static export
    EXPORT_DIRECTORY: str = "out"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        return Path(self.POSTS_DIRECTORY).expanduser().resolve()

    @property
    def post_extensions(self) -> tuple[str, ...]:
        """Recognised extensions, normalised to a leading dot."""
        return tuple(
            ext if ext.startswith(".") else f".{ext}" for ext in self.POST_EXTENSIONS
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
