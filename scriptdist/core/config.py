from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Packaging settings loaded from SCRIPTDIST_* environment variables.

    The resolver limits bound the external dependency copy only; the
    packaging pipeline itself runs unbounded on the calling thread.
    """

    model_config = SettingsConfigDict(
        env_prefix="SCRIPTDIST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Dependency resolution (Maven)
    maven_executable: str = "mvn"
    resolver_timeout_seconds: int = 600

    # rlimits applied to the resolver process. 0 disables the memory cap.
    resolver_mem_limit_bytes: int = 12 * 1024 * 1024 * 1024
    resolver_cpu_limit_seconds: int = 600

    # Project templates. None means the templates shipped with the package.
    template_dir: Optional[Path] = None

    # App
    debug: bool = True

    @field_validator("resolver_timeout_seconds", "resolver_cpu_limit_seconds")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be a positive number of seconds")
        return v


def get_settings() -> Settings:
    return Settings()
