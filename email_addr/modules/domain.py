"""Валидация доменной части адреса."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from email_addr.modules.constants import MAX_DOMAIN_LENGTH, MAX_LABEL_LENGTH
from email_addr.modules.errors import DomainError, DomainErrorKind
from email_addr.modules.ip_literal import validate_ip_literal
from email_addr.modules.utils.charclass import HYPHEN, BytesLike, as_bytes, is_digit, is_domain_char


class DomainKind(str, Enum):
    """Форма доменной части."""

    STANDARD = "standard"
    IPV4_LITERAL = "ipv4_literal"
    IPV6_LITERAL = "ipv6_literal"


@dataclass(frozen=True)
class Domain:
    """Проверенная доменная часть и её форма.

    Форма вычисляется при проверке в конструкторе и не передаётся извне.
    """

    value: bytes
    kind: DomainKind = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise TypeError(f"Domain.value must be bytes, got {type(self.value).__name__}")
        object.__setattr__(self, "kind", _check_domain(self.value))

    @property
    def is_literal(self) -> bool:
        return self.kind is not DomainKind.STANDARD

    def __str__(self) -> str:
        return self.value.decode("ascii")


def validate_domain(raw: BytesLike) -> Domain:
    """Проверяет домен: DNS-имя из меток либо IP-литерал в квадратных скобках."""
    return Domain(as_bytes(raw))


def _check_domain(value: bytes) -> DomainKind:
    if len(value) > MAX_DOMAIN_LENGTH:
        raise DomainError(DomainErrorKind.DOMAIN_TOO_LONG, value)

    if value[:1] == b"[":
        version = validate_ip_literal(value)
        return DomainKind.IPV6_LITERAL if version == 6 else DomainKind.IPV4_LITERAL

    _validate_standard(value)
    return DomainKind.STANDARD


def _validate_standard(value: bytes) -> None:
    if not value:
        raise DomainError(DomainErrorKind.EMPTY_DOMAIN, value)
    if not all(is_domain_char(byte) for byte in value):
        raise DomainError(DomainErrorKind.INVALID_DOMAIN_CHAR, value)
    if b"." not in value:
        raise DomainError(DomainErrorKind.DOMAIN_NEEDS_TWO_PARTS, value)

    labels = value.split(b".")
    for label in labels:
        if not label:
            raise DomainError(DomainErrorKind.EMPTY_LABEL, value)
        if len(label) > MAX_LABEL_LENGTH:
            raise DomainError(DomainErrorKind.LABEL_TOO_LONG, value)
        if label[0] == HYPHEN or label[-1] == HYPHEN:
            raise DomainError(DomainErrorKind.LABEL_HYPHEN_BOUNDARY, value)

    if all(is_digit(byte) for byte in labels[-1]):
        raise DomainError(DomainErrorKind.NUMERIC_TLD, value)
