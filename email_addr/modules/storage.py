"""Адаптер хранения: тип столбца SQLAlchemy, компактная упаковка и индексный хэш."""

from __future__ import annotations

import logging
from typing import Any, Optional

from sqlalchemy.types import String, TypeDecorator

from email_addr.config import get_settings
from email_addr.modules.address import ValidatedAddress, build_address, parse_address
from email_addr.modules.constants import RESERVED_HASH_VALUES
from email_addr.modules.equivalence import hash_address
from email_addr.modules.errors import AddressError

LOGGER = logging.getLogger("email_addr.storage")


class StorageFormatError(ValueError):
    """Упакованное значение повреждено или обрезано."""


def index_hash(addr: ValidatedAddress, replacement: Optional[int] = None) -> int:
    """Хэш для индексных структур, резервирующих 0 и 0xFFFFFFFF."""
    value = hash_address(addr)
    if value in RESERVED_HASH_VALUES:
        if replacement is None:
            replacement = get_settings().storage.hash_sentinel_replacement
        return replacement
    return value


def encode_parts(addr: ValidatedAddress) -> bytes:
    """Упаковывает адрес в два участка с однобайтовым префиксом длины."""
    local = addr.local.value
    domain = addr.domain.value
    return bytes([len(local)]) + local + bytes([len(domain)]) + domain


def decode_parts(blob: bytes) -> ValidatedAddress:
    """Распаковывает результат encode_parts с повторной валидацией обеих частей."""
    if len(blob) < 2:
        raise StorageFormatError("Упакованный адрес слишком короткий.")
    local_len = blob[0]
    local_end = 1 + local_len
    if local_end >= len(blob):
        raise StorageFormatError("Длина локальной части выходит за границы буфера.")
    domain_len = blob[local_end]
    domain_start = local_end + 1
    if domain_start + domain_len != len(blob):
        raise StorageFormatError("Длина домена не совпадает с размером буфера.")
    return build_address(blob[1:local_end], blob[domain_start:])


class EmailAddressType(TypeDecorator):
    """Тип столбца: хранит `local@domain`, в Python отдаёт ValidatedAddress.

    При записи строка проходит полную проверку, так что в базу не попадает
    некорректный адрес. Готовый ValidatedAddress тоже проверяется заново в
    виде строки: в столбец пишется только то, что process_result_value
    сможет прочитать.
    """

    impl = String
    cache_ok = True

    def __init__(self, length: Optional[int] = None, **kwargs: Any) -> None:
        super().__init__(length or get_settings().storage.column_length, **kwargs)

    def process_bind_param(self, value: Any, dialect: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, ValidatedAddress):
            text = str(value)
            # части, проверенные по отдельности, могут не складываться в
            # читаемую строку: `"abc\"` + `x.com` даёт незакрытую кавычку
            try:
                parse_address(text)
            except AddressError:
                LOGGER.warning("Адрес не читается обратно после записи: %r", text)
                raise
            return text
        LOGGER.debug("Проверка адреса перед записью: %r", value)
        return str(parse_address(value))

    def process_result_value(self, value: Optional[str], dialect: Any) -> Optional[ValidatedAddress]:
        if value is None:
            return None
        return parse_address(value)
