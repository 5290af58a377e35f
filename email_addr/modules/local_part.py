"""Валидация локальной части адреса (RFC 5321/5322)."""

from __future__ import annotations

from dataclasses import dataclass

from email_addr.modules.constants import MAX_LOCAL_PART_LENGTH
from email_addr.modules.errors import LocalPartError, LocalPartErrorKind
from email_addr.modules.utils.charclass import (
    BACKSLASH,
    DOT,
    DQUOTE,
    BytesLike,
    as_bytes,
    is_dot_atom,
    is_escapable_char,
    is_quoted_char,
    is_unquoted_char,
)


@dataclass(frozen=True)
class LocalPart:
    """Проверенная локальная часть адреса.

    Конструктор сам выполняет проверку: экземпляр с некорректным значением
    создать нельзя.
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise TypeError(f"LocalPart.value must be bytes, got {type(self.value).__name__}")
        _check_local_part(self.value)

    @property
    def is_quoted(self) -> bool:
        return is_quoted_form(self.value)

    @property
    def content(self) -> bytes:
        """Содержимое без обрамляющих кавычек (для формы без кавычек — само значение)."""
        if self.is_quoted:
            return self.value[1:-1]
        return self.value

    def __str__(self) -> str:
        return self.value.decode("ascii")


def is_quoted_form(value: bytes) -> bool:
    return len(value) >= 2 and value[0] == DQUOTE and value[-1] == DQUOTE


def validate_local_part(raw: BytesLike) -> LocalPart:
    """Проверяет локальную часть и возвращает LocalPart или бросает LocalPartError."""
    return LocalPart(as_bytes(raw))


def _check_local_part(value: bytes) -> None:
    if not value:
        raise LocalPartError(LocalPartErrorKind.EMPTY_LOCAL_PART, value)
    if len(value) > MAX_LOCAL_PART_LENGTH:
        raise LocalPartError(LocalPartErrorKind.LOCAL_PART_TOO_LONG, value)

    # одиночная кавычка тоже считается формой в кавычках
    if value[0] == DQUOTE and value[-1] == DQUOTE:
        _validate_quoted(value)
    else:
        _validate_unquoted(value)


def _validate_quoted(value: bytes) -> None:
    if len(value) <= 2:
        raise LocalPartError(LocalPartErrorKind.EMPTY_QUOTED_LOCAL_PART, value)

    prev_was_backslash = False
    for byte in value[1:-1]:
        if prev_was_backslash:
            if not is_escapable_char(byte):
                raise LocalPartError(LocalPartErrorKind.INVALID_ESCAPED_CHAR, value)
            prev_was_backslash = False
            continue
        if byte == BACKSLASH:
            prev_was_backslash = True
            continue
        if not is_quoted_char(byte):
            raise LocalPartError(LocalPartErrorKind.INVALID_QUOTED_CHAR, value)


def _validate_unquoted(value: bytes) -> None:
    if value[0] == DOT or value[-1] == DOT:
        raise LocalPartError(LocalPartErrorKind.LEADING_OR_TRAILING_DOT, value)

    prev_was_dot = False
    for byte in value:
        if byte == DOT:
            if prev_was_dot:
                raise LocalPartError(LocalPartErrorKind.CONSECUTIVE_DOTS, value)
            prev_was_dot = True
            continue
        prev_was_dot = False
        if not is_unquoted_char(byte):
            raise LocalPartError(LocalPartErrorKind.INVALID_LOCAL_PART_CHAR, value)


def quoted_collapsible(local: LocalPart) -> bool:
    """Можно ли снять кавычки без изменения смысла.

    Истинно, только если часть в кавычках и её содержимое само по себе
    является корректным dot-atom. Содержимое длиной 0 или одиночная точка
    dot-atom не образуют.
    """
    return local.is_quoted and is_dot_atom(local.content)
