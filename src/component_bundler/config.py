"""Bundler configuration contract."""

import codecs
import hashlib
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from component_bundler.errors import InvalidConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = Field(alias="APP_ENV", default="dev")
    log_level: str = Field(alias="LOG_LEVEL", default="INFO")

    cache_dir: str = Field(alias="BUNDLER_CACHE_DIR", default=".tmp")
    component_name: str = Field(alias="BUNDLER_COMPONENT_NAME", default="ng-component")
    hash_algorithm: str = Field(alias="BUNDLER_HASH_ALGORITHM", default="md5")
    digest_length: int = Field(alias="BUNDLER_DIGEST_LENGTH", default=8)
    encoding: str = Field(alias="BUNDLER_ENCODING", default="utf-8")
    scss_include_paths: str = Field(alias="BUNDLER_SCSS_INCLUDE_PATHS", default="./src/")

    def include_paths(self) -> list[str]:
        return [item.strip() for item in self.scss_include_paths.split(",") if item.strip()]


def validate_settings(settings: Settings) -> None:
    problems: list[str] = []

    if settings.hash_algorithm not in hashlib.algorithms_available:
        problems.append(f"BUNDLER_HASH_ALGORITHM={settings.hash_algorithm!r} is not supported")
    else:
        digest_size = hashlib.new(settings.hash_algorithm).digest_size
        if digest_size == 0:
            problems.append(
                f"BUNDLER_HASH_ALGORITHM={settings.hash_algorithm!r} has no fixed digest size"
            )
        elif not 1 <= settings.digest_length <= digest_size * 2:
            problems.append(
                f"BUNDLER_DIGEST_LENGTH must be between 1 and {digest_size * 2}, "
                f"got {settings.digest_length}"
            )

    try:
        codecs.lookup(settings.encoding)
    except LookupError:
        problems.append(f"BUNDLER_ENCODING={settings.encoding!r} is not a known encoding")

    if not settings.component_name.strip():
        problems.append("BUNDLER_COMPONENT_NAME must not be empty")

    if problems:
        raise InvalidConfigurationError(f"invalid bundler configuration: {'; '.join(problems)}")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
