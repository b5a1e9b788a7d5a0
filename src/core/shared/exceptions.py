"""
Exceções de Domínio do DirectService.

Resultados esperados (validação, não encontrado) NÃO são exceções:
trafegam como `Error` dentro de um `Result`. As exceções deste módulo
sinalizam apenas erros de programação, como ler o valor de um `Result`
que falhou.

Hierarquia:
    DomainException (base)
    └── ResultAccessError (acesso indevido a Result)
"""

from typing import Optional


class DomainException(Exception):
    """
    Exceção base para todos os erros de domínio.

    Example:
        try:
            department = result.value
        except DomainException as e:
            logger.error(f"Erro de domínio: {e}")
    """

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa exceção para dicionário (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ResultAccessError(DomainException):
    """
    Acesso ao lado errado de um Result.

    Lançada ao ler `value` de um Result com falha ou `error`
    de um Result com sucesso. O chamador deveria ter testado
    `is_success`/`is_failure` antes.

    Example:
        result = Identifier.create("123")
        result.value  # ResultAccessError
    """

    def __init__(self, message: str, error=None):
        self.error = error
        super().__init__(message, "RESULT_ACCESS_ERROR")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.error is not None:
            result["cause"] = self.error.to_dict()
        return result
