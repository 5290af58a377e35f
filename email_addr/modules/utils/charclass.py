"""Классы символов для локальной части и домена (RFC 5321/5322)."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview, str]

DOT = 0x2E
AT = 0x40
DQUOTE = 0x22
BACKSLASH = 0x5C
HYPHEN = 0x2D
COLON = 0x3A
TAB = 0x09

_ATEXT_SPECIALS = frozenset(b"!#$%&'*+-/=?^_`{|}~")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


def as_bytes(value: BytesLike) -> bytes:
    """Приводит входное значение к bytes; строки кодируются в UTF-8."""
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def is_alpha(byte: int) -> bool:
    return 0x41 <= byte <= 0x5A or 0x61 <= byte <= 0x7A


def is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def is_hex_digit(byte: int) -> bool:
    return byte in _HEX_DIGITS


def is_unquoted_char(byte: int) -> bool:
    """Символ atext: допустим в локальной части без кавычек (точка проверяется отдельно)."""
    return is_alpha(byte) or is_digit(byte) or byte in _ATEXT_SPECIALS


def is_quoted_char(byte: int) -> bool:
    """Печатный ASCII (32–126), кроме обратной косой черты и кавычки."""
    return 0x20 <= byte <= 0x7E and byte != BACKSLASH and byte != DQUOTE


def is_escapable_char(byte: int) -> bool:
    """Символ, допустимый после обратной косой черты в кавычках."""
    return byte == TAB or 0x20 <= byte <= 0x7E


def is_domain_char(byte: int) -> bool:
    return is_alpha(byte) or is_digit(byte) or byte == HYPHEN or byte == DOT


def is_dot_atom(content: bytes) -> bool:
    """Проверяет, что последовательность является корректным dot-atom.

    Пустая строка dot-atom не является. Ведущая, замыкающая и двойная точки
    запрещены, остальные байты должны принадлежать классу atext.
    """
    if not content:
        return False
    if content[0] == DOT or content[-1] == DOT:
        return False
    prev_was_dot = False
    for byte in content:
        if byte == DOT:
            if prev_was_dot:
                return False
            prev_was_dot = True
            continue
        prev_was_dot = False
        if not is_unquoted_char(byte):
            return False
    return True


def bounded_casecmp(left: bytes, right: bytes) -> int:
    """Сравнение без учёта регистра; при равном общем префиксе короче — меньше."""
    return bytes_cmp(left.lower(), right.lower())


def bytes_cmp(left: bytes, right: bytes) -> int:
    """Побайтовое сравнение с результатом -1/0/1."""
    if left < right:
        return -1
    if left > right:
        return 1
    return 0
