"""Application settings management for the receipt extraction service."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

from .field_extractors.date import DATE_ORDERS

DEFAULT_MAX_UPLOAD_BYTES = 15 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    ocr_engine: str
    ocr_language: str
    date_order: str
    max_upload_bytes: int
    environment: str

    @property
    def debug(self) -> bool:
        return self.environment == "development"

    @staticmethod
    def _read_env(name: str, default: str) -> str:
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        return value.strip()

    @classmethod
    def load(cls) -> "Settings":
        _ensure_env_file_loaded()
        ocr_engine = cls._read_env("OCR_ENGINE", "local").lower()
        if ocr_engine != "local":
            raise RuntimeError("OCR_ENGINE currently supports only 'local'")
        ocr_language = cls._read_env("OCR_LANGUAGE", "eng")

        date_order = cls._read_env("DATE_ORDER", "MDY").upper()
        if date_order not in DATE_ORDERS:
            raise RuntimeError(f"DATE_ORDER must be one of {', '.join(DATE_ORDERS)}")

        raw_limit = cls._read_env("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES))
        try:
            max_upload_bytes = int(raw_limit)
        except ValueError as exc:
            raise RuntimeError("MAX_UPLOAD_BYTES must be an integer") from exc
        if max_upload_bytes <= 0:
            raise RuntimeError("MAX_UPLOAD_BYTES must be positive")

        environment = cls._read_env("APP_ENV", "production").lower()

        return cls(
            ocr_engine=ocr_engine,
            ocr_language=ocr_language,
            date_order=date_order,
            max_upload_bytes=max_upload_bytes,
            environment=environment,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.load()


def reset_settings_state() -> None:
    """Reset cached settings and environment file state (for tests)."""
    global _ENV_FILE_LOADED
    _ENV_FILE_LOADED = False
    get_settings.cache_clear()


_ENV_FILE_LOADED = False


def _ensure_env_file_loaded() -> None:
    global _ENV_FILE_LOADED
    if _ENV_FILE_LOADED:
        return
    candidates = [Path.cwd() / ".env", Path(__file__).resolve().parent.parent / ".env"]
    loaded = False
    for env_path in candidates:
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, override=False)
            loaded = True
    if not loaded:
        load_dotenv(override=False)
    _ENV_FILE_LOADED = True


__all__ = ["Settings", "get_settings", "reset_settings_state"]
