"""
Base Codec: позиционное кодирование целых в строки и обратно

Поддерживаемые основания и алфавиты:
- 2:  01
- 8:  01234567
- 10: 0123456789
- 16: 0123456789ABCDEF
- 32: ABCDEFGHIJKLMNOPQRSTUVWXYZ234567 (RFC 4648)
- 64: A-Z a-z 0-9 + /, с padding '=' до длины, кратной 4

Схема общая: кодирование повторным divmod (старший разряд первым),
декодирование по Горнеру: result = result * base + index(char).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. decode(encode(n, b), b) == n для любого n >= 0 и поддерживаемого b
2. 0 кодируется первым символом алфавита ("A===" для Base64)
3. len(encode_base64(n)) % 4 == 0
4. Символ вне алфавита → FormatError; основание вне набора → UnsupportedBaseError
"""

from enum import IntEnum
from typing import Final, Optional

from src.core.math.errors import (
    ArgumentError,
    FormatError,
    OperationResult,
    UnsupportedBaseError,
    capture,
)
from src.core.math.integer_safeguards import require_integer

# =============================================================================
# АЛФАВИТЫ
# =============================================================================

BASE2_ALPHABET: Final[str] = "01"
BASE8_ALPHABET: Final[str] = "01234567"
BASE10_ALPHABET: Final[str] = "0123456789"
BASE16_ALPHABET: Final[str] = "0123456789ABCDEF"
BASE32_ALPHABET: Final[str] = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE64_ALPHABET: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)

BASE64_PAD: Final[str] = "="

# Base64 блок: 4 символа
BASE64_BLOCK: Final[int] = 4


class BaseFormat(IntEnum):
    """Поддерживаемые основания."""

    BASE2 = 2
    BASE8 = 8
    BASE10 = 10
    BASE16 = 16
    BASE32 = 32
    BASE64 = 64


ALPHABETS: Final[dict[BaseFormat, str]] = {
    BaseFormat.BASE2: BASE2_ALPHABET,
    BaseFormat.BASE8: BASE8_ALPHABET,
    BaseFormat.BASE10: BASE10_ALPHABET,
    BaseFormat.BASE16: BASE16_ALPHABET,
    BaseFormat.BASE32: BASE32_ALPHABET,
    BaseFormat.BASE64: BASE64_ALPHABET,
}


def resolve_base(base: int) -> BaseFormat:
    """
    Проверка основания.

    Raises:
        UnsupportedBaseError: Если base не из {2, 8, 10, 16, 32, 64}
    """
    try:
        return BaseFormat(base)
    except ValueError:
        raise UnsupportedBaseError(
            f"Invalid base-format {base!r}! "
            "Supported base-formats are: 2, 8, 10, 16, 32, and 64."
        ) from None


# =============================================================================
# ОБЩИЙ АЛГОРИТМ
# =============================================================================


def convert_to_base(number: int, base: int, alphabet: str) -> str:
    """
    Запись неотрицательного целого в позиционной системе.

    Args:
        number: Кодируемое число (>= 0)
        base: Основание (= len(alphabet))
        alphabet: Символы разрядов, индекс = значение разряда

    Returns:
        Строка, старший разряд первым

    Raises:
        ArgumentError: Если number < 0 или base не согласован с алфавитом

    Examples:
        >>> convert_to_base(255, 16, BASE16_ALPHABET)
        'FF'
        >>> convert_to_base(0, 2, BASE2_ALPHABET)
        '0'
    """
    require_integer(number, "number")
    _check_alphabet(base, alphabet)

    if number < 0:
        raise ArgumentError(f"Only non-negative numbers can be converted, got {number}")

    if number == 0:
        return alphabet[0]

    digits: list[str] = []
    current = number
    while current > 0:
        current, remainder = divmod(current, base)
        digits.append(alphabet[remainder])

    return "".join(reversed(digits))


def convert_from_base(value: str, base: int, alphabet: str) -> int:
    """
    Разбор строки в позиционной системе (схема Горнера).

    Args:
        value: Непустая строка из символов алфавита
        base: Основание (= len(alphabet))
        alphabet: Символы разрядов

    Raises:
        ArgumentError: Если строка пустая
        FormatError: Если встретился символ вне алфавита

    Examples:
        >>> convert_from_base("FF", 16, BASE16_ALPHABET)
        255
    """
    _check_alphabet(base, alphabet)
    if not value:
        raise ArgumentError("Input string cannot be null or empty.")

    result = 0
    for position, char in enumerate(value):
        index = alphabet.find(char)
        if index < 0:
            raise FormatError(
                f"Invalid character {char!r} at position {position} in base-{base} string."
            )
        result = result * base + index

    return result


def _check_alphabet(base: int, alphabet: str) -> None:
    if base < 2 or len(alphabet) != base:
        raise ArgumentError(
            f"Alphabet of length {len(alphabet)} does not match base {base}"
        )


# =============================================================================
# BASE64
# =============================================================================


def convert_to_base64(number: int) -> str:
    """
    Base64-запись числа с padding '=' до длины, кратной 4.

    Examples:
        >>> convert_to_base64(0)
        'A==='
        >>> convert_to_base64(64)
        'BA=='
    """
    digits = convert_to_base(number, BaseFormat.BASE64, BASE64_ALPHABET)
    padding = (BASE64_BLOCK - len(digits) % BASE64_BLOCK) % BASE64_BLOCK
    return digits + BASE64_PAD * padding


def convert_from_base64(value: str) -> int:
    """
    Разбор Base64-записи; хвостовой padding '=' отбрасывается.

    Строка без padding принимается. Строка с padding должна иметь длину,
    кратную 4, и не более трёх символов '='.

    Raises:
        ArgumentError: Если строка пустая
        FormatError: Если padding некорректен или символ вне алфавита

    Examples:
        >>> convert_from_base64("BA==")
        64
    """
    if not value:
        raise ArgumentError("Input string cannot be null or empty.")

    digits = value.rstrip(BASE64_PAD)
    padding = len(value) - len(digits)

    if not digits:
        raise FormatError(f"Base-64 string {value!r} contains padding only.")
    if padding >= BASE64_BLOCK:
        raise FormatError(f"Base-64 string {value!r} has {padding} padding characters.")
    if padding and len(value) % BASE64_BLOCK != 0:
        raise FormatError(
            f"Padded base-64 string length must be a multiple of {BASE64_BLOCK}, "
            f"got {len(value)}."
        )

    return convert_from_base(digits, BaseFormat.BASE64, BASE64_ALPHABET)


# =============================================================================
# ФИКСИРОВАННЫЕ ОСНОВАНИЯ
# =============================================================================


def convert_to_base32(number: int) -> str:
    return convert_to_base(number, BaseFormat.BASE32, BASE32_ALPHABET)


def convert_from_base32(value: str) -> int:
    return convert_from_base(value, BaseFormat.BASE32, BASE32_ALPHABET)


def convert_to_base16(number: int) -> str:
    return convert_to_base(number, BaseFormat.BASE16, BASE16_ALPHABET)


def convert_from_base16(value: str) -> int:
    return convert_from_base(value, BaseFormat.BASE16, BASE16_ALPHABET)


def convert_to_base10(number: int) -> str:
    return convert_to_base(number, BaseFormat.BASE10, BASE10_ALPHABET)


def convert_from_base10(value: str) -> int:
    return convert_from_base(value, BaseFormat.BASE10, BASE10_ALPHABET)


def convert_to_base8(number: int) -> str:
    return convert_to_base(number, BaseFormat.BASE8, BASE8_ALPHABET)


def convert_from_base8(value: str) -> int:
    return convert_from_base(value, BaseFormat.BASE8, BASE8_ALPHABET)


def convert_to_base2(number: int) -> str:
    return convert_to_base(number, BaseFormat.BASE2, BASE2_ALPHABET)


def convert_from_base2(value: str) -> int:
    return convert_from_base(value, BaseFormat.BASE2, BASE2_ALPHABET)


# =============================================================================
# DISPATCH ПО ОСНОВАНИЮ
# =============================================================================


def encode(number: int, base: int) -> str:
    """
    Запись числа в одном из поддерживаемых оснований.

    Raises:
        UnsupportedBaseError: Если основание не поддерживается
    """
    base_format = resolve_base(base)
    if base_format == BaseFormat.BASE64:
        return convert_to_base64(number)
    return convert_to_base(number, base_format, ALPHABETS[base_format])


def decode(value: str, base: int) -> int:
    """
    Разбор строки в одном из поддерживаемых оснований.

    Raises:
        UnsupportedBaseError: Если основание не поддерживается
        FormatError: Если строка не является записью в этом основании
    """
    base_format = resolve_base(base)
    if base_format == BaseFormat.BASE64:
        return convert_from_base64(value)
    return convert_from_base(value, base_format, ALPHABETS[base_format])


def convert_base(value: str, old_base: int, new_base: int) -> str:
    """
    Перевод записи числа из одного основания в другое.

    Оба основания проверяются до разбора строки.

    Examples:
        >>> convert_base("FF", 16, 2)
        '11111111'
        >>> convert_base("255", 10, 64)
        'D/=='
    """
    resolve_base(old_base)
    resolve_base(new_base)
    return encode(decode(value, old_base), new_base)


def try_convert_from_base(value: str, base: int) -> OperationResult[int]:
    """decode без исключений."""
    return capture(decode, value, base)


# =============================================================================
# ДИАГНОСТИКА ЗАПИСИ
# =============================================================================


def is_valid_for_base(value: str, base: int) -> bool:
    """
    Является ли строка корректной записью числа в основании base.

    Неподдерживаемое основание → False.
    """
    return try_convert_from_base(value, base).ok


def probable_base(value: str) -> Optional[BaseFormat]:
    """
    Наименьшее поддерживаемое основание, в алфавите которого есть все
    символы строки.

    Для Base64 хвостовой padding не учитывается. Алфавит Base32 не содержит
    цифр 0, 1, 8, 9, поэтому "19" распознаётся как BASE10, а не BASE32.

    Returns:
        BaseFormat или None, если строка пустая или не подходит ни одно основание

    Examples:
        >>> probable_base("0101")
        <BaseFormat.BASE2: 2>
        >>> probable_base("ff") is BaseFormat.BASE64
        True
    """
    if not value:
        return None

    for base_format in BaseFormat:
        if is_valid_for_base(value, base_format):
            return base_format

    return None
