"""Application settings resolved once at start-up.

The Gemini key is read from ``GEMINI_API_KEY`` (or ``API_KEY``, the name the
web version used); the other settings use the ``MATHMASTER_`` prefix. Real
environment variables win over a ``.env`` file in the working directory.
Without a key the app still runs; theory questions fall back to local ones.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import AliasChoices, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mathmaster.constants.noise_constants import (
    DEFAULT_SENSITIVITY,
    MAX_SENSITIVITY,
    MIN_SENSITIVITY,
)
from mathmaster.constants.quiz_constants import FEEDBACK_WINDOW_MS
from mathmaster.core.theory_provider import DEFAULT_THEORY_MODEL

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseSettings):
    """Settings shared by ``app_main`` and the UI.

    Invalid values never stop the app: they are logged and the default is kept.
    """

    model_config = SettingsConfigDict(
        env_prefix="MATHMASTER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    gemini_api_key: str = Field(
        "", validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY")
    )
    gemini_model: str = DEFAULT_THEORY_MODEL
    request_timeout_seconds: float = Field(
        20.0, validation_alias="MATHMASTER_REQUEST_TIMEOUT"
    )
    log_level: str = "INFO"
    default_sensitivity: int = Field(DEFAULT_SENSITIVITY, validation_alias="MATHMASTER_SENSITIVITY")
    feedback_window_ms: int = Field(FEEDBACK_WINDOW_MS, validation_alias="MATHMASTER_FEEDBACK_WINDOW_MS")

    @field_validator("request_timeout_seconds", "feedback_window_ms", mode="before")
    @classmethod
    def _positive_number(cls, value: Any, info: ValidationInfo) -> Any:
        default = cls.model_fields[info.field_name].default
        try:
            number = float(value)
        except (TypeError, ValueError):
            number = 0.0
        if number > 0:
            return int(number) if info.field_name == "feedback_window_ms" else number
        logger.warning("Ignoring invalid %s=%r", info.field_name, value)
        return default

    @field_validator("default_sensitivity", mode="before")
    @classmethod
    def _sensitivity_in_range(cls, value: Any) -> int:
        try:
            sensitivity = int(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid sensitivity=%r", value)
            return DEFAULT_SENSITIVITY
        return max(MIN_SENSITIVITY, min(MAX_SENSITIVITY, sensitivity))

    @field_validator("log_level", mode="before")
    @classmethod
    def _known_log_level(cls, value: Any) -> str:
        level = str(value).strip().upper()
        if level in _VALID_LOG_LEVELS:
            return level
        logger.warning("Ignoring unknown log_level=%r", value)
        return "INFO"

    @property
    def has_gemini(self) -> bool:
        return bool(self.gemini_api_key)
