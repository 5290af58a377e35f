"""Поиск разделителя @ с учётом кавычек и экранирования."""

from __future__ import annotations

from typing import Tuple

from email_addr.modules.errors import SplitError, SplitErrorKind
from email_addr.modules.utils.charclass import AT, BACKSLASH, DQUOTE, BytesLike, as_bytes


def find_separator(raw: BytesLike) -> int:
    """Возвращает индекс последнего @ вне кавычек.

    Однопроходный сканер: обратная косая черта экранирует ровно один следующий
    байт, неэкранированная кавычка переключает режим кавычек. Побеждает
    последний подходящий @, поэтому `a@b@example.com` делится перед
    `example.com`, а валидатор локальной части затем отклонит `a@b`.
    """
    data = as_bytes(raw)
    in_quotes = False
    escaped = False
    candidate = -1

    for index, byte in enumerate(data):
        if escaped:
            escaped = False
            continue
        if byte == BACKSLASH:
            escaped = True
        elif byte == DQUOTE:
            in_quotes = not in_quotes
        elif byte == AT and not in_quotes:
            candidate = index

    if in_quotes:
        raise SplitError(SplitErrorKind.UNTERMINATED_QUOTE, data)
    if escaped:
        raise SplitError(SplitErrorKind.DANGLING_ESCAPE, data)
    if candidate < 0:
        raise SplitError(SplitErrorKind.NO_SEPARATOR, data)
    return candidate


def split_address(raw: BytesLike) -> Tuple[bytes, bytes]:
    """Делит адрес на (локальная часть, домен) без их валидации."""
    data = as_bytes(raw)
    index = find_separator(data)
    return data[:index], data[index + 1 :]
