"""Общие фикстуры для тестов."""

from typing import Iterator

import pytest

from email_addr.config import get_settings

ENV_KEYS = (
    "EMAIL_ADDR_LOG_LEVEL",
    "EMAIL_ADDR_HASH_SENTINEL_REPLACEMENT",
    "EMAIL_ADDR_COLUMN_LENGTH",
)


@pytest.fixture(autouse=True)
def default_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Очищает переменные окружения пакета и кэш настроек."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def sample_addresses() -> list:
    """Адреса, покрывающие все три ветви сравнения локальной части."""
    return [
        "foo@example.com",
        "FOO@EXAMPLE.COM",
        '"foo"@example.com',
        '"FOO"@Example.com',
        '"foo bar"@example.com',
        '"Foo Bar"@example.com',
        "foo.bar@example.com",
        '"foo.bar"@example.com',
        '"foo..bar"@example.com',
        "bar@example.com",
        "foo@example.org",
        "user@[192.168.1.1]",
        '"a\\"b"@example.com',
        "x@[IPv6:2001:db8::1]",
        "X@[ipv6:2001:DB8::1]",
        "zz@example.com",
        '"zz"@example.com',
    ]
