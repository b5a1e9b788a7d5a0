"""
Result - Sucesso ou Erro tipado.

Substitui exceções para resultados esperados do domínio: factories
de value objects e métodos de mutação devolvem `Result` em vez de
lançar. Um Result contém exatamente um dos dois lados.

Example:
    result = Identifier.create("financeiro")
    if result.is_failure:
        return result.error.to_dict()
    identifier = result.value
"""

from typing import Callable, Generic, Optional, TypeVar

from .errors import Error
from .exceptions import ResultAccessError


T = TypeVar("T")
U = TypeVar("U")


class Result(Generic[T]):
    """
    Valor de sucesso OU um Error.

    Construa via `Result.success(...)` ou `Result.fail(...)`.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        if error is not None and value is not None:
            raise ValueError("Result não pode ter valor e erro ao mesmo tempo")
        self._value = value
        self._error = error

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: Error) -> "Result[T]":
        if error is None:
            raise ValueError("Result.fail exige um Error")
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> T:
        """
        Valor de sucesso.

        Raises:
            ResultAccessError: Se o Result representa falha
        """
        if self._error is not None:
            raise ResultAccessError(
                f"Result com falha não possui valor: {self._error.message}",
                error=self._error,
            )
        return self._value

    @property
    def error(self) -> Error:
        """
        Erro da falha.

        Raises:
            ResultAccessError: Se o Result representa sucesso
        """
        if self._error is None:
            raise ResultAccessError("Result com sucesso não possui erro")
        return self._error

    def map(self, func: Callable[[T], U]) -> "Result[U]":
        """Transforma o valor de sucesso; falhas passam intactas."""
        if self.is_failure:
            return Result.fail(self._error)
        return Result.success(func(self._value))

    def bind(self, func: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Encadeia outra operação falível."""
        if self.is_failure:
            return Result.fail(self._error)
        return func(self._value)

    def unwrap_or(self, default: T) -> T:
        return default if self.is_failure else self._value

    def __bool__(self) -> bool:
        return self.is_success

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return False
        return self._value == other._value and self._error == other._error

    def __hash__(self) -> int:
        return hash((self._value, self._error))

    def __repr__(self) -> str:
        if self.is_failure:
            return f"Result.fail({self._error!r})"
        return f"Result.success({self._value!r})"
