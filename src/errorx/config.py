from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CALLER_SENTINEL = "????"
DEFAULT_RENDER_INDENT = "\t"

LogLevel = Literal[
    "TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"
]


class Settings(BaseSettings):
    caller_sentinel: str = Field(default=DEFAULT_CALLER_SENTINEL)
    render_indent: str = Field(default=DEFAULT_RENDER_INDENT)
    log_level: LogLevel = Field(default="ERROR")
    traceback_limit: int = Field(default=6, ge=1)

    @field_validator("render_indent", mode="before")
    @classmethod
    def _parse_render_indent(cls, v: str) -> str:
        if v == "":
            return DEFAULT_RENDER_INDENT
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _parse_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_prefix="ERRORX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
