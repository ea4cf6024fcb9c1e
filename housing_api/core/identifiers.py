"""
Приведение id из пути к числу.

Без проверки: нечисловая строка даёт float("nan"), и это значение уходит
в сервис как есть. Известное ограничение, не исправлять молча.
"""
import math
import re

# Десятичная запись: 12, -3.5, .5, 5., 1e3, +2E-2. Только ASCII-цифры
_DECIMAL = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")
_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}

# Целые сверх 2**53 в double не точны: дальше возвращаем float (BSON int64 их не примет)
_MAX_EXACT_INT = 2**53


def _exact_or_float(number: int | float) -> int | float:
    """int, если значение целое и точно представимо в double, иначе float."""
    try:
        number = float(number)
    except OverflowError:
        # int длиннее double: как в JS, бесконечность
        return math.inf if number > 0 else -math.inf
    if math.isfinite(number) and number.is_integer() and abs(number) <= _MAX_EXACT_INT:
        return int(number)
    return number


def to_number(value: str) -> int | float:
    """
    Строка → число по правилам унарного плюса.

    "7" → 7, " 7 " → 7, "" → 0, "0x1f" → 31, "1e3" → 1000, "7.5" → 7.5,
    "foo" → nan, "99999999999999999999" → 1e20 (float).
    """
    s = value.strip()
    if not s:
        return 0
    if s in _INFINITY:
        return _INFINITY[s]
    prefix = s[:2].lower()
    if prefix in _RADIX:
        digits = s[2:]
        # int() принимает "_", знак и не-ASCII цифры, унарный плюс нет
        if not digits or not digits.isascii() or "_" in digits or digits[0] in "+-":
            return math.nan
        try:
            return _exact_or_float(int(digits, _RADIX[prefix]))
        except ValueError:
            return math.nan
    if not _DECIMAL.fullmatch(s):
        return math.nan
    return _exact_or_float(float(s))
