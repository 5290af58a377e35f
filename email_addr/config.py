"""Загрузка конфигурации из переменных окружения."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from email_addr.modules.constants import DEFAULT_HASH_SENTINEL_REPLACEMENT


@dataclass(frozen=True)
class StorageSettings:
    """Параметры слоя хранения адресов."""

    column_length: int
    hash_sentinel_replacement: int


@dataclass(frozen=True)
class Settings:
    """Глобальные настройки пакета."""

    log_level: str
    storage: StorageSettings


def _env(key: str, default: str = "") -> str:
    """Возвращает значение переменной окружения или значение по умолчанию."""
    return os.getenv(key, default).strip()


def _env_int(key: str, default: int) -> int:
    value = _env(key)
    if not value:
        return default
    # допускаем шестнадцатеричную запись: 0x12345678
    return int(value, 0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Загружает настройки один раз и кэширует их для повторного использования."""
    replacement = _env_int("EMAIL_ADDR_HASH_SENTINEL_REPLACEMENT", DEFAULT_HASH_SENTINEL_REPLACEMENT)
    if replacement in (0, 0xFFFFFFFF) or not 0 <= replacement <= 0xFFFFFFFF:
        raise ValueError(
            "EMAIL_ADDR_HASH_SENTINEL_REPLACEMENT должен быть 32-битным значением, отличным от 0 и 0xFFFFFFFF"
        )

    storage = StorageSettings(
        column_length=_env_int("EMAIL_ADDR_COLUMN_LENGTH", 320),
        hash_sentinel_replacement=replacement,
    )

    return Settings(
        log_level=_env("EMAIL_ADDR_LOG_LEVEL", "INFO").upper(),
        storage=storage,
    )
