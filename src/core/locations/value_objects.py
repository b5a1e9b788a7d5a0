"""
Value Objects do Domínio de Locais.

Value Objects:
- LocationName: 3-120 caracteres, não vazio
- Address: não vazio, sem limite de tamanho
- TimeZone: string opaca, sem validação
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from src.core.shared.errors import Error
from src.core.shared.result import Result


@dataclass(frozen=True)
class LocationName:
    """Nome de exibição do local."""

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 120

    @classmethod
    def create(cls, name: Optional[str]) -> Result["LocationName"]:
        if (
            name is None
            or not name.strip()
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
class Address:
    """Endereço postal em texto livre."""

    value: str

    @classmethod
    def create(cls, address: Optional[str]) -> Result["Address"]:
        if address is None or not address.strip():
            return Result.fail(Error.validation(
                "Endereço é obrigatório",
                "address",
            ))
        return Result.success(cls(address))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TimeZone:
    # Nome IANA esperado ("America/Sao_Paulo"), mas não verificado.
    value: str

    @classmethod
    def create(cls, time_zone: str) -> Result["TimeZone"]:
        return Result.success(cls(time_zone))

    def __str__(self) -> str:
        return self.value
