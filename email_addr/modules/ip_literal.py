"""Проверка адресных литералов вида [IPv4] и [IPv6:...]."""

from __future__ import annotations

from email_addr.modules.constants import IPV6_TAG
from email_addr.modules.errors import DomainError, DomainErrorKind
from email_addr.modules.utils.charclass import COLON, is_digit, is_hex_digit

IPV4_GROUPS = 4
IPV6_SEGMENTS = 8
MAX_IPV6_SEGMENT_LENGTH = 4


def validate_ip_literal(literal: bytes) -> int:
    """Проверяет литерал в квадратных скобках и возвращает версию IP (4 или 6).

    Префикс `IPv6:` сравнивается без учёта регистра (RFC 5234).
    """
    if len(literal) < 2 or literal[:1] != b"[" or literal[-1:] != b"]":
        raise DomainError(DomainErrorKind.MALFORMED_IP_LITERAL, literal)

    inner = literal[1:-1]
    if inner[: len(IPV6_TAG)].lower() == IPV6_TAG:
        validate_ipv6(inner[len(IPV6_TAG) :], literal)
        return 6
    validate_ipv4(inner, literal)
    return 4


def validate_ipv4(text: bytes, source: bytes = b"") -> None:
    """Ровно четыре десятичные группы по 1–3 цифры со значением 0–255."""
    source = source or text
    groups = text.split(b".")
    if len(groups) != IPV4_GROUPS:
        raise DomainError(DomainErrorKind.INVALID_IPV4, source)
    for group in groups:
        if not 1 <= len(group) <= 3:
            raise DomainError(DomainErrorKind.INVALID_IPV4, source)
        if not all(is_digit(byte) for byte in group):
            raise DomainError(DomainErrorKind.INVALID_IPV4, source)
        if int(group) > 255:
            raise DomainError(DomainErrorKind.INVALID_IPV4, source)


def validate_ipv6(text: bytes, source: bytes = b"") -> None:
    """Проверяет IPv6 без префикса: хекстеты и не более одного `::`.

    Однопроходный сканер. Пустой сегмент допустим только как часть
    маркера сжатия; одиночное двоеточие в начале или в конце отклоняется.
    """
    source = source or text
    segments = 0
    compressed = False
    seg_start = 0
    index = 0
    length = len(text)

    while index < length:
        if text[index] == COLON:
            segment = text[seg_start:index]
            if segment:
                _check_segment(segment, source)
                segments += 1
            if index + 1 < length and text[index + 1] == COLON:
                if compressed:
                    raise DomainError(DomainErrorKind.MULTIPLE_DOUBLE_COLON, source)
                compressed = True
                index += 1
            elif not segment:
                raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT, source)
            seg_start = index + 1
        index += 1

    tail = text[seg_start:]
    if tail:
        _check_segment(tail, source)
        segments += 1
    elif not (compressed and text.endswith(b"::")):
        raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT, source)

    if compressed:
        if segments > IPV6_SEGMENTS - 1:
            raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT_COUNT, source)
    elif segments != IPV6_SEGMENTS:
        raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT_COUNT, source)


def _check_segment(segment: bytes, source: bytes) -> None:
    if len(segment) > MAX_IPV6_SEGMENT_LENGTH:
        raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT, source)
    if not all(is_hex_digit(byte) for byte in segment):
        raise DomainError(DomainErrorKind.INVALID_IPV6_SEGMENT, source)
