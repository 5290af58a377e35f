"""Проверка разбора полного адреса и операций над ValidatedAddress."""

import logging

import pytest

from email_addr.modules.address import (
    ValidatedAddress,
    addresses_equal,
    build_address,
    format_address,
    is_valid_address,
    normalize_text,
    normalized_domain,
    normalized_local_part,
    parse_address,
    same_domain,
)
from email_addr.modules.domain import DomainKind
from email_addr.modules.equivalence import hash_address
from email_addr.modules.errors import (
    AddressError,
    DomainError,
    DomainErrorKind,
    LocalPartError,
    LocalPartErrorKind,
    SplitError,
    SplitErrorKind,
    describe_error,
)

CORRECT = [
    "simple@example.com",
    "very.common@example.com",
    "first_last@example.com",
    "first-last@example.com",
    '"john.doe"@example.com',
    '"john..doe"@example.org',
    "email@subdomain.example.com",
    "a@example.com",
    "abcdefghijklmnopqrstuvwxyz@example.com",
    "Test.Email@Example.Com",
    "user@[192.168.1.1]",
    "user@[IPv6:2001:db8::1]",
]


@pytest.mark.parametrize("raw", CORRECT)
def test_parse_keeps_original_text(raw: str) -> None:
    addr = parse_address(raw)
    assert str(addr) == raw
    assert format_address(addr) == raw
    assert addr.to_bytes() == raw.encode("ascii")
    assert is_valid_address(raw) is True


@pytest.mark.parametrize(
    ("raw", "error", "kind"),
    [
        ("abc.example.com", SplitError, SplitErrorKind.NO_SEPARATOR),
        ("a@b@c@example.com", LocalPartError, LocalPartErrorKind.INVALID_LOCAL_PART_CHAR),
        ('this is"not\\allowed@example.com', SplitError, SplitErrorKind.UNTERMINATED_QUOTE),
        ('this\\ still\\"not\\\\allowed@example.com', LocalPartError, LocalPartErrorKind.INVALID_LOCAL_PART_CHAR),
        ("@example.com", LocalPartError, LocalPartErrorKind.EMPTY_LOCAL_PART),
        ("test@", DomainError, DomainErrorKind.EMPTY_DOMAIN),
        ("test@[333.333.333.333]", DomainError, DomainErrorKind.INVALID_IPV4),
        ("test(comment)@example.com", LocalPartError, LocalPartErrorKind.INVALID_LOCAL_PART_CHAR),
    ],
)
def test_parse_rejects(raw: str, error: type, kind: object) -> None:
    with pytest.raises(error) as excinfo:
        parse_address(raw)
    assert excinfo.value.kind is kind
    assert is_valid_address(raw) is False


def test_parse_logs_rejection(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="email_addr.address"):
        with pytest.raises(AddressError):
            parse_address("no-at-sign")
    assert "no_separator" in caplog.text


def test_build_address_validates_both_parts() -> None:
    addr = build_address(b'"x y"', b"[10.0.0.1]")
    assert addr.local.is_quoted is True
    assert addr.domain.kind is DomainKind.IPV4_LITERAL

    with pytest.raises(DomainError):
        build_address("x", "example")


def test_rich_comparisons_follow_equivalence() -> None:
    upper = parse_address("USER@Example.com")
    lower = parse_address('"user"@example.COM')
    other = parse_address("zed@example.com")

    assert upper == lower
    assert upper != other
    assert upper < other
    assert other > lower
    assert upper <= lower and upper >= lower
    assert hash(upper) == hash(lower) == hash_address(upper)
    assert upper != "user@example.com"


def test_addresses_work_in_sets_and_sorting() -> None:
    unique = {parse_address("A@x.com"), parse_address("a@X.COM"), parse_address('"a"@x.com')}
    assert len(unique) == 1

    ordered = sorted(parse_address(raw) for raw in ["b@b.com", '"q q"@a.com', "z@a.com", "a@a.com"])
    assert [str(addr) for addr in ordered] == ["a@a.com", "z@a.com", '"q q"@a.com', "b@b.com"]


def test_addresses_equal_treats_invalid_as_unequal() -> None:
    assert addresses_equal("A@x.com", '"a"@X.COM') is True
    assert addresses_equal("a@x.com", "b@x.com") is False
    assert addresses_equal("bad", "bad") is False


def test_same_domain() -> None:
    assert same_domain(parse_address("a@Example.com"), parse_address("b@example.COM")) is True
    assert same_domain(parse_address("a@example.com"), parse_address("a@example.org")) is False


def test_normalized_accessors() -> None:
    addr = parse_address('"Foo.Bar"@Example.COM')
    assert normalized_local_part(addr) == "foo.bar"
    assert normalized_domain(addr) == "example.com"
    assert normalize_text(addr) == "foo.bar@example.com"

    kept = parse_address('"Foo Bar"@Example.COM')
    assert normalized_local_part(kept) == '"Foo Bar"'


def test_validated_address_is_immutable() -> None:
    addr = parse_address("a@example.com")
    assert isinstance(addr, ValidatedAddress)
    with pytest.raises(AttributeError):
        addr.local = parse_address("b@example.com").local  # type: ignore[misc]


def test_describe_error_renders_reason() -> None:
    with pytest.raises(LocalPartError) as excinfo:
        parse_address("te..st@example.com")
    message = describe_error(excinfo.value)
    assert message == 'invalid local-part of email address: unquoted local part cannot contain consecutive dots ("te..st")'


def test_validated_address_requires_validated_parts() -> None:
    addr = parse_address("a@example.com")
    with pytest.raises(TypeError):
        ValidatedAddress(local=b"a", domain=addr.domain)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        ValidatedAddress(local=addr.local, domain="example.com")  # type: ignore[arg-type]
