"""Разбор полного адреса и операции над проверенными адресами."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from email_addr.modules import equivalence
from email_addr.modules.domain import Domain, validate_domain
from email_addr.modules.errors import AddressError
from email_addr.modules.local_part import LocalPart, validate_local_part
from email_addr.modules.splitter import split_address
from email_addr.modules.utils.charclass import BytesLike

LOGGER = logging.getLogger("email_addr.address")


@dataclass(frozen=True, eq=False)
class ValidatedAddress:
    """Пара (локальная часть, домен), прошедшая обе проверки.

    Равенство, порядок и хэш определяются правилами эквивалентности RFC,
    а не побайтным совпадением: `FOO@Example.com == foo@example.com`.
    Обе части проверяются в собственных конструкторах.
    """

    local: LocalPart
    domain: Domain

    def __post_init__(self) -> None:
        if not isinstance(self.local, LocalPart):
            raise TypeError(f"local must be LocalPart, got {type(self.local).__name__}")
        if not isinstance(self.domain, Domain):
            raise TypeError(f"domain must be Domain, got {type(self.domain).__name__}")

    def to_bytes(self) -> bytes:
        return self.local.value + b"@" + self.domain.value

    def __str__(self) -> str:
        return self.to_bytes().decode("ascii")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidatedAddress):
            return NotImplemented
        return equivalence.compare(self, other) == 0

    def __lt__(self, other: ValidatedAddress) -> bool:
        if not isinstance(other, ValidatedAddress):
            return NotImplemented
        return equivalence.compare(self, other) < 0

    def __le__(self, other: ValidatedAddress) -> bool:
        if not isinstance(other, ValidatedAddress):
            return NotImplemented
        return equivalence.compare(self, other) <= 0

    def __gt__(self, other: ValidatedAddress) -> bool:
        if not isinstance(other, ValidatedAddress):
            return NotImplemented
        return equivalence.compare(self, other) > 0

    def __ge__(self, other: ValidatedAddress) -> bool:
        if not isinstance(other, ValidatedAddress):
            return NotImplemented
        return equivalence.compare(self, other) >= 0

    def __hash__(self) -> int:
        return equivalence.hash_address(self)


def build_address(local: BytesLike, domain: BytesLike) -> ValidatedAddress:
    """Проверяет обе части и собирает ValidatedAddress."""
    return ValidatedAddress(local=validate_local_part(local), domain=validate_domain(domain))


def parse_address(raw: BytesLike) -> ValidatedAddress:
    """Разбирает строку `local@domain`; при ошибке бросает AddressError."""
    try:
        local, domain = split_address(raw)
        return build_address(local, domain)
    except AddressError as exc:
        LOGGER.debug("Адрес отклонён (%s): %r", exc.kind.value, raw)
        raise


def format_address(addr: ValidatedAddress) -> str:
    return str(addr)


def is_valid_address(raw: BytesLike) -> bool:
    try:
        parse_address(raw)
    except AddressError:
        return False
    return True


def addresses_equal(raw1: BytesLike, raw2: BytesLike) -> bool:
    """Сравнивает два внешних адреса; непроверяемый адрес не равен ничему."""
    try:
        addr1 = parse_address(raw1)
        addr2 = parse_address(raw2)
    except AddressError:
        return False
    return equivalence.compare(addr1, addr2) == 0


def same_domain(addr1: ValidatedAddress, addr2: ValidatedAddress) -> bool:
    return equivalence.compare_domain_only(addr1, addr2) == 0


def normalized_local_part(addr: ValidatedAddress) -> str:
    return str(equivalence.normalize_local_part(addr.local))


def normalized_domain(addr: ValidatedAddress) -> str:
    return str(equivalence.normalize_domain(addr.domain))


def normalize_text(addr: ValidatedAddress) -> str:
    """Строковая форма нормализованного адреса."""
    return str(equivalence.normalize(addr))
