"""Общие константы для модулей валидации."""

from __future__ import annotations

# RFC 5321, раздел 4.5.3.1
MAX_LOCAL_PART_LENGTH = 64
MAX_DOMAIN_LENGTH = 255
MAX_LABEL_LENGTH = 63

IPV6_TAG = b"ipv6:"

HASH_SEED = 5381
HASH_MASK = 0xFFFFFFFF

# значения, зарезервированные хэш-индексами хранилища
RESERVED_HASH_VALUES = frozenset({0, 0xFFFFFFFF})
DEFAULT_HASH_SENTINEL_REPLACEMENT = 0x12345678
