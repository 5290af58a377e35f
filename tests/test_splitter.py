"""Проверка поиска разделителя @."""

import pytest

from email_addr.modules.errors import SplitError, SplitErrorKind
from email_addr.modules.splitter import find_separator, split_address


def test_split_simple_address() -> None:
    assert split_address(b"user@example.com") == (b"user", b"example.com")
    assert split_address("user@example.com") == (b"user", b"example.com")
    assert find_separator("x@y.org") == 1


def test_at_inside_quoted_section_is_skipped() -> None:
    assert split_address('a"@"b@example.com') == (b'a"@"b', b"example.com")
    assert split_address('"a@b"@example.com') == (b'"a@b"', b"example.com")


def test_last_unquoted_at_wins() -> None:
    assert split_address("a@b@c.com") == (b"a@b", b"c.com")


def test_escaped_characters_do_not_split_or_toggle_quotes() -> None:
    assert split_address(r"a\@b@c.com") == (rb"a\@b", b"c.com")
    assert split_address(r'"a\"@b"@c.com') == (rb'"a\"@b"', b"c.com")


def test_round_trip_recovers_parts() -> None:
    local = b'"john..doe"'
    domain = b"[IPv6:2001:db8::1]"
    assert split_address(local + b"@" + domain) == (local, domain)


def test_empty_parts_are_left_to_validators() -> None:
    assert split_address("@example.com") == (b"", b"example.com")
    assert split_address("test@") == (b"test", b"")


@pytest.mark.parametrize(
    ("raw", "kind"),
    [
        ('"abc@example.com', SplitErrorKind.UNTERMINATED_QUOTE),
        ('test"@example.com', SplitErrorKind.UNTERMINATED_QUOTE),
        ('"test"test"@example.com', SplitErrorKind.UNTERMINATED_QUOTE),
        ("abc@example.com\\", SplitErrorKind.DANGLING_ESCAPE),
        ("abc.example.com", SplitErrorKind.NO_SEPARATOR),
        (r"a\@example.com", SplitErrorKind.NO_SEPARATOR),
        ("", SplitErrorKind.NO_SEPARATOR),
    ],
)
def test_split_failures(raw: str, kind: SplitErrorKind) -> None:
    with pytest.raises(SplitError) as excinfo:
        split_address(raw)
    assert excinfo.value.kind is kind
