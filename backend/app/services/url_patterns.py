from __future__ import annotations

ASCII_DIGITS = "0123456789"

TILL_SALARY = "till-salary"
HOW_MUCH = "how-much"
PAY_DAY = "pay-day"

MIN_PAY_DAY = 1
MAX_PAY_DAY = 31


def split_path(path: str) -> list[str] | None:
    """Split an absolute URL path into its segments; `None` for relative paths."""
    if not path.startswith("/"):
        return None
    return path[1:].split("/")


def is_how_much_path(path: str) -> bool:
    return split_path(path) == [TILL_SALARY, HOW_MUCH]


def _is_pay_day_segment(segment: str) -> bool:
    # One digit 1-9, or two digits with a leading 1-3 (10-39).
    if len(segment) == 1:
        return segment in ASCII_DIGITS[1:]
    if len(segment) == 2:
        return segment[0] in "123" and segment[1] in ASCII_DIGITS
    return False


def match_list_dates_path(path: str, suffix: str) -> str | None:
    """
    Return the pay-day segment of `/till-salary/pay-day/<n>/<suffix>`.

    `None` when the path has any other shape, including a trailing slash.
    """
    segments = split_path(path)
    if segments is None or len(segments) != 4:
        return None

    prefix, resource, pay_day, tail = segments
    if prefix != TILL_SALARY or resource != PAY_DAY or tail != suffix:
        return None
    if not _is_pay_day_segment(pay_day):
        return None
    return pay_day


def parse_pay_day(text: str | None) -> int | None:
    """Parse integer text (optional sign, ASCII digits) and keep it only when in [1, 31]."""
    if not text:
        return None

    digits = text[1:] if text[0] in "+-" else text
    if not digits or any(char not in ASCII_DIGITS for char in digits):
        return None

    value = int(text)
    if value < MIN_PAY_DAY or value > MAX_PAY_DAY:
        return None
    return value
