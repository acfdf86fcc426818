"""
Errors: таксономия ошибок number-theory ядра

Все ошибки сообщаются синхронно в точке обнаружения. Иерархия:

    NumberTheoryError(ValueError)
    ├── FormatError          невалидный символ алфавита, битый Base64 padding
    ├── ArgumentError        нарушены предусловия аргументов
    │   └── UnsupportedBaseError (также FormatError)
    └── DomainError          операция математически не определена
    ArithmeticFailure(ArithmeticError)  Pollard's Rho не смог разложить n

Для вызывающего кода, которому не нужны exceptions как control flow,
есть OperationResult: значение либо ErrorKind + сообщение + флаг retryable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


# =============================================================================
# ERROR KINDS
# =============================================================================


class ErrorKind(str, Enum):
    """Класс ошибки для result-ориентированного API."""

    FORMAT = "FORMAT"
    ARGUMENT = "ARGUMENT"
    DOMAIN = "DOMAIN"
    ARITHMETIC_FAILURE = "ARITHMETIC_FAILURE"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumberTheoryError(ValueError):
    """Базовый класс ошибок валидации входа."""

    kind: ErrorKind = ErrorKind.ARGUMENT
    retryable: bool = False


class FormatError(NumberTheoryError):
    """Строка не является записью числа в выбранном алфавите."""

    kind = ErrorKind.FORMAT


class ArgumentError(NumberTheoryError):
    """
    Нарушены предусловия аргументов.

    Примеры: разная длина residues/moduli в CRT, неположительная битовая
    длина, min >= max при генерации из диапазона, a <= 0 или m <= 1 для
    обратного элемента по Ферма.
    """

    kind = ErrorKind.ARGUMENT


class UnsupportedBaseError(FormatError, ArgumentError):
    """Основание не входит в {2, 8, 10, 16, 32, 64}."""

    kind = ErrorKind.ARGUMENT


class DomainError(NumberTheoryError):
    """Операция не определена для входа (например, log неположительного числа)."""

    kind = ErrorKind.DOMAIN


class ArithmeticFailure(ArithmeticError):
    """
    Pollard's Rho исчерпал поиск без нетривиального делителя.

    Фатально для текущего вызова факторизации. Ошибка retryable: другой seed
    может дать разложение, но повтор остаётся решением вызывающего кода.
    """

    kind: ErrorKind = ErrorKind.ARITHMETIC_FAILURE
    retryable: bool = True

    def __init__(self, message: str, n: Optional[int] = None, outcome: Any = None):
        super().__init__(message)
        self.n = n
        self.outcome = outcome


_EXCEPTION_BY_KIND: dict[ErrorKind, type[Exception]] = {
    ErrorKind.FORMAT: FormatError,
    ErrorKind.ARGUMENT: ArgumentError,
    ErrorKind.DOMAIN: DomainError,
    ErrorKind.ARITHMETIC_FAILURE: ArithmeticFailure,
}


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Результат операции без exception-based control flow."""

    value: Optional[T]
    error_kind: Optional[ErrorKind] = None
    message: str = ""
    retryable: bool = False

    # Контекст ArithmeticFailure: неразложенное число и исход Pollard's Rho
    n: Optional[int] = None
    outcome: Any = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, value: T) -> "OperationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls,
        error_kind: ErrorKind,
        message: str,
        retryable: bool = False,
        n: Optional[int] = None,
        outcome: Any = None,
    ) -> "OperationResult[T]":
        return cls(
            value=None,
            error_kind=error_kind,
            message=message,
            retryable=retryable,
            n=n,
            outcome=outcome,
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> "OperationResult[T]":
        """
        Конверсия исключения таксономии в failure-результат.

        Raises:
            TypeError: если exc не относится к таксономии
        """
        if not isinstance(exc, (NumberTheoryError, ArithmeticFailure)):
            raise TypeError(f"Not a number-theory error: {type(exc).__name__}")
        if isinstance(exc, ArithmeticFailure):
            return cls.failure(
                exc.kind, str(exc), retryable=exc.retryable, n=exc.n, outcome=exc.outcome
            )
        return cls.failure(exc.kind, str(exc), retryable=exc.retryable)

    def unwrap(self) -> T:
        """
        Значение успешного результата.

        Raises:
            NumberTheoryError | ArithmeticFailure: исключение, соответствующее error_kind
        """
        if self.error_kind == ErrorKind.ARITHMETIC_FAILURE:
            raise ArithmeticFailure(self.message, n=self.n, outcome=self.outcome)
        if self.error_kind is not None:
            raise _EXCEPTION_BY_KIND[self.error_kind](self.message)
        return self.value  # type: ignore[return-value]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> OperationResult[T]:
    """
    Вызов func с переводом ошибок таксономии в OperationResult.

    Исключения вне таксономии (TypeError, KeyboardInterrupt и т.д.) пробрасываются.
    """
    try:
        return OperationResult.success(func(*args, **kwargs))
    except (NumberTheoryError, ArithmeticFailure) as exc:
        return OperationResult.from_exception(exc)
