"""Отношение эквивалентности, порядок, хэш и нормализация адресов.

Правила RFC 5321/5322: домен сравнивается без учёта регистра всегда,
локальная часть — без учёта регистра, если она без кавычек или если
содержимое кавычек само является корректным dot-atom ("схлопываемая"
форма). Две части в кавычках сравниваются побайтно; несхлопываемая часть
в кавычках сортируется после любой части без кавычек.

Хэш и нормализация строятся на `_canonical_local`. Равные по compare()
части в кавычках совпадают побайтно, а в остальных ветвях сравниваются
ровно те байты, что идут в хэш, поэтому из compare(a, b) == 0 следует
hash(a) == hash(b).
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Iterable

from email_addr.modules.constants import HASH_MASK, HASH_SEED
from email_addr.modules.domain import Domain, validate_domain
from email_addr.modules.local_part import LocalPart, quoted_collapsible, validate_local_part
from email_addr.modules.utils.charclass import AT, bounded_casecmp, bytes_cmp

if TYPE_CHECKING:
    from email_addr.modules.address import ValidatedAddress


def rolling_hash_step(state: int, byte: int) -> int:
    """Один шаг DJB2: state * 33 + byte по модулю 2**32."""
    return ((state << 5) + state + byte) & HASH_MASK


def _fold(state: int, data: Iterable[int]) -> int:
    for byte in data:
        state = rolling_hash_step(state, byte)
    return state


def _canonical_local(local: LocalPart) -> bytes:
    if quoted_collapsible(local):
        return local.content.lower()
    if local.is_quoted:
        return local.value
    return local.value.lower()


def compare_domains(domain1: Domain, domain2: Domain) -> int:
    return bounded_casecmp(domain1.value, domain2.value)


def compare_local_parts(local1: LocalPart, local2: LocalPart) -> int:
    """Сравнивает локальные части; возвращает -1, 0 или 1."""
    if not local1.is_quoted and not local2.is_quoted:
        return bounded_casecmp(local1.value, local2.value)
    if local1.is_quoted and local2.is_quoted:
        return bytes_cmp(local1.value, local2.value)

    quoted, plain = (local1, local2) if local1.is_quoted else (local2, local1)
    if quoted_collapsible(quoted):
        result = bounded_casecmp(quoted.content, plain.value)
    else:
        # несхлопываемая форма в кавычках идёт после формы без кавычек
        result = 1
    return result if local1.is_quoted else -result


def compare(addr1: ValidatedAddress, addr2: ValidatedAddress) -> int:
    """Полное сравнение: сначала домены, затем локальные части."""
    result = compare_domains(addr1.domain, addr2.domain)
    if result != 0:
        return result
    return compare_local_parts(addr1.local, addr2.local)


def compare_domain_only(addr1: ValidatedAddress, addr2: ValidatedAddress) -> int:
    return compare_domains(addr1.domain, addr2.domain)


def hash_local_part(local: LocalPart) -> int:
    return _fold(HASH_SEED, _canonical_local(local))


def hash_address(addr: ValidatedAddress) -> int:
    """32-битный хэш, согласованный с compare()."""
    state = hash_local_part(addr.local)
    state = rolling_hash_step(state, AT)
    return _fold(state, addr.domain.value.lower())


def normalize_local_part(local: LocalPart) -> LocalPart:
    """Снимает кавычки, где это возможно, и приводит к нижнему регистру.

    Несхлопываемая часть в кавычках возвращается без изменений.
    """
    return validate_local_part(_canonical_local(local))


def normalize_domain(domain: Domain) -> Domain:
    return validate_domain(domain.value.lower())


def normalize(addr: ValidatedAddress) -> ValidatedAddress:
    """Каноническая форма адреса; normalize(normalize(x)) == normalize(x)."""
    return dataclasses.replace(
        addr,
        local=normalize_local_part(addr.local),
        domain=normalize_domain(addr.domain),
    )
