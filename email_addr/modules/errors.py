"""Типизированные ошибки разбора и валидации адресов."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class SplitErrorKind(str, Enum):
    """Причины, по которым адрес не удалось разделить по @."""

    UNTERMINATED_QUOTE = "unterminated_quote"
    DANGLING_ESCAPE = "dangling_escape"
    NO_SEPARATOR = "no_separator"


class LocalPartErrorKind(str, Enum):
    """Причины отклонения локальной части."""

    EMPTY_LOCAL_PART = "empty_local_part"
    LOCAL_PART_TOO_LONG = "local_part_too_long"
    EMPTY_QUOTED_LOCAL_PART = "empty_quoted_local_part"
    INVALID_ESCAPED_CHAR = "invalid_escaped_char"
    INVALID_QUOTED_CHAR = "invalid_quoted_char"
    LEADING_OR_TRAILING_DOT = "leading_or_trailing_dot"
    CONSECUTIVE_DOTS = "consecutive_dots"
    INVALID_LOCAL_PART_CHAR = "invalid_local_part_char"


class DomainErrorKind(str, Enum):
    """Причины отклонения доменной части."""

    EMPTY_DOMAIN = "empty_domain"
    DOMAIN_TOO_LONG = "domain_too_long"
    MALFORMED_IP_LITERAL = "malformed_ip_literal"
    INVALID_IPV4 = "invalid_ipv4"
    INVALID_IPV6_SEGMENT = "invalid_ipv6_segment"
    MULTIPLE_DOUBLE_COLON = "multiple_double_colon"
    INVALID_IPV6_SEGMENT_COUNT = "invalid_ipv6_segment_count"
    EMPTY_LABEL = "empty_label"
    LABEL_TOO_LONG = "label_too_long"
    LABEL_HYPHEN_BOUNDARY = "label_hyphen_boundary"
    INVALID_DOMAIN_CHAR = "invalid_domain_char"
    DOMAIN_NEEDS_TWO_PARTS = "domain_needs_two_parts"
    NUMERIC_TLD = "numeric_tld"


_MESSAGES: Dict[Enum, str] = {
    SplitErrorKind.UNTERMINATED_QUOTE: "quoted section is not terminated",
    SplitErrorKind.DANGLING_ESCAPE: "address ends with an unfinished escape",
    SplitErrorKind.NO_SEPARATOR: "missing @ separator",
    LocalPartErrorKind.EMPTY_LOCAL_PART: "local part cannot be empty",
    LocalPartErrorKind.LOCAL_PART_TOO_LONG: "local part exceeds maximum length of 64 characters",
    LocalPartErrorKind.EMPTY_QUOTED_LOCAL_PART: "quoted local part cannot be empty",
    LocalPartErrorKind.INVALID_ESCAPED_CHAR: "invalid character after backslash in quoted local part",
    LocalPartErrorKind.INVALID_QUOTED_CHAR: "invalid character in quoted local part",
    LocalPartErrorKind.LEADING_OR_TRAILING_DOT: "unquoted local part cannot begin or end with a dot",
    LocalPartErrorKind.CONSECUTIVE_DOTS: "unquoted local part cannot contain consecutive dots",
    LocalPartErrorKind.INVALID_LOCAL_PART_CHAR: "invalid character in unquoted local part",
    DomainErrorKind.EMPTY_DOMAIN: "domain cannot be empty",
    DomainErrorKind.DOMAIN_TOO_LONG: "domain exceeds maximum length of 255 characters",
    DomainErrorKind.MALFORMED_IP_LITERAL: "IP literal must be enclosed in square brackets",
    DomainErrorKind.INVALID_IPV4: "invalid IPv4 address",
    DomainErrorKind.INVALID_IPV6_SEGMENT: "invalid IPv6 segment",
    DomainErrorKind.MULTIPLE_DOUBLE_COLON: "IPv6 address may contain only one '::'",
    DomainErrorKind.INVALID_IPV6_SEGMENT_COUNT: "invalid number of IPv6 segments",
    DomainErrorKind.EMPTY_LABEL: "domain label cannot be empty",
    DomainErrorKind.LABEL_TOO_LONG: "domain label exceeds maximum length of 63 characters",
    DomainErrorKind.LABEL_HYPHEN_BOUNDARY: "domain label cannot begin or end with a hyphen",
    DomainErrorKind.INVALID_DOMAIN_CHAR: "invalid character in domain",
    DomainErrorKind.DOMAIN_NEEDS_TWO_PARTS: "domain must contain at least two labels",
    DomainErrorKind.NUMERIC_TLD: "top-level domain cannot be all-numeric",
}


class AddressError(ValueError):
    """Базовая ошибка: адрес (или его часть) не соответствует грамматике."""

    subject = "email address"

    def __init__(self, kind: Enum, value: bytes = b"") -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.value}: {value!r}")


class SplitError(AddressError):
    """Адрес не удалось разделить на локальную часть и домен."""


class LocalPartError(AddressError):
    """Локальная часть не прошла валидацию."""

    subject = "local-part of email address"


class DomainError(AddressError):
    """Доменная часть не прошла валидацию."""

    subject = "domain of email address"


def describe_error(exc: AddressError) -> str:
    """Возвращает читаемое сообщение для пользователя."""
    reason = _MESSAGES.get(exc.kind, exc.kind.value)
    text = exc.value.decode("utf-8", errors="replace")
    return f'invalid {exc.subject}: {reason} ("{text}")'
