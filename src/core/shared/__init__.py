"""
Shared Domain Components.

Contém componentes compartilhados entre todos os domínios:
- Taxonomia de erros e Result
- Exceções de domínio (erros de programação)
- Interfaces (Ports) para relógio e geração de identidades
"""

from .errors import Error, ErrorType
from .result import Result
from .exceptions import DomainException, ResultAccessError
from .interfaces import (
    Clock,
    SystemClock,
    FrozenClock,
    IdGenerator,
    UUIDGenerator,
    SequentialIdGenerator,
    is_empty_id,
)

__all__ = [
    "Error",
    "ErrorType",
    "Result",
    "DomainException",
    "ResultAccessError",
    "Clock",
    "SystemClock",
    "FrozenClock",
    "IdGenerator",
    "UUIDGenerator",
    "SequentialIdGenerator",
    "is_empty_id",
]
