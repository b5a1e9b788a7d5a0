"""
Taxonomia de Erros do Domínio.

Todo método falível do core devolve um `Result` carregando
exatamente um `Error`. A camada de API é quem traduz o `ErrorType`
para sua representação de transporte (ex: status HTTP).

Tipos:
    NONE        Sentinela de "sem erro" (nunca anexado a um Error real)
    VALIDATION  Entrada violou regra de campo (campo informado)
    NOT_FOUND   Associação/entidade referenciada não existe
    FAILURE     Reservado
    CONFLICT    Reservado
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorType(Enum):
    """Categorias de erro expostas pelo core."""

    NONE = "none"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    FAILURE = "failure"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class Error:
    """
    Erro de domínio tipado e imutável.

    Attributes:
        type: Categoria do erro
        message: Mensagem legível para humanos
        code: Código opcional para consumo por máquinas
        invalid_field: Campo ofensor (apenas VALIDATION)

    Example:
        Error.validation("Nome deve ter entre 3 e 150 caracteres", "name")
    """

    type: ErrorType
    message: str
    code: Optional[str] = None
    invalid_field: Optional[str] = None

    def __post_init__(self):
        if self.type is ErrorType.NONE:
            raise ValueError("ErrorType.NONE não pode ser usado em um Error")

    @classmethod
    def validation(
        cls,
        message: str,
        invalid_field: Optional[str] = None,
        code: Optional[str] = None,
    ) -> "Error":
        """Entrada inválida para um campo."""
        if code is None:
            code = (
                f"VALIDATION_ERROR_{invalid_field.upper()}"
                if invalid_field else "VALIDATION_ERROR"
            )
        return cls(ErrorType.VALIDATION, message, code, invalid_field)

    @classmethod
    def not_found(cls, message: str, code: Optional[str] = None) -> "Error":
        """Referência ausente."""
        return cls(ErrorType.NOT_FOUND, message, code or "NOT_FOUND")

    @classmethod
    def failure(cls, message: str, code: Optional[str] = None) -> "Error":
        return cls(ErrorType.FAILURE, message, code or "FAILURE")

    @classmethod
    def conflict(cls, message: str, code: Optional[str] = None) -> "Error":
        return cls(ErrorType.CONFLICT, message, code or "CONFLICT")

    def to_dict(self) -> dict:
        """Serializa erro para dicionário (útil para APIs)."""
        result = {
            "error": self.code,
            "type": self.type.value,
            "message": self.message,
        }
        if self.invalid_field:
            result["field"] = self.invalid_field
        return result

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
