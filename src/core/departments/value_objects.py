"""
Value Objects do Domínio de Departamentos.

Wrappers imutáveis e auto-validados sobre strings. A factory
`create()` é o único ponto de validação; o construtor direto é
reservado para reidratação de dados já persistidos.

Value Objects:
- DepartmentName: 3-150 caracteres, não vazio
- Identifier: 3-150 letras latinas (A-Z, a-z)
- Path: string opaca, sem validação
"""

from dataclasses import dataclass
import re
from typing import ClassVar, Optional

from src.core.shared.errors import Error
from src.core.shared.result import Result


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


@dataclass(frozen=True)
class DepartmentName:
    """Nome de exibição do departamento."""

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 150

    @classmethod
    def create(cls, name: Optional[str]) -> Result["DepartmentName"]:
        if (
            _is_blank(name)
            or len(name) < cls.MIN_LENGTH
            or len(name) > cls.MAX_LENGTH
        ):
            return Result.fail(Error.validation(
                f"Nome deve ter entre {cls.MIN_LENGTH} e {cls.MAX_LENGTH} caracteres",
                "name",
            ))
        return Result.success(cls(name))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Identifier:
    """
    Identificador legível do departamento (slug).

    Regras:
    - 3 a 150 caracteres
    - Apenas letras latinas, sem dígitos, espaços ou símbolos
    """

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 150
    _LATIN_ONLY: ClassVar["re.Pattern[str]"] = re.compile(r"[A-Za-z]+")

    @classmethod
    def create(cls, value: Optional[str]) -> Result["Identifier"]:
        if (
            _is_blank(value)
            or len(value) < cls.MIN_LENGTH
            or len(value) > cls.MAX_LENGTH
        ):
            return Result.fail(Error.validation(
                f"Identificador deve ter entre {cls.MIN_LENGTH} e {cls.MAX_LENGTH} caracteres",
                "identifier",
            ))

        if not cls._LATIN_ONLY.fullmatch(value):
            return Result.fail(Error.validation(
                "Identificador deve conter apenas letras latinas",
                "identifier",
            ))

        return Result.success(cls(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Path:
    """
    Caminho materializado na árvore de departamentos.

    Opaco para o domínio: qualquer string é aceita, inclusive vazia.
    """

    value: str

    @classmethod
    def create(cls, path: str) -> Result["Path"]:
        return Result.success(cls(path))

    def __str__(self) -> str:
        return self.value
