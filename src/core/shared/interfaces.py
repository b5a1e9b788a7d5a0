"""
Interfaces (Ports) - Capacidades injetadas no Core.

O core não lê o relógio do sistema nem gera identificadores por
conta própria: recebe essas capacidades de fora. Assim os testes
controlam o tempo e as identidades de forma determinística.

Ports:
- Clock: fonte de "agora"
- IdGenerator: fonte de identidades de registros de associação

Implementações fornecidas:
- SystemClock / FrozenClock
- UUIDGenerator / SequentialIdGenerator
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid


class Clock(ABC):
    """
    Fonte de tempo do domínio.

    Example:
        class NtpClock(Clock):
            def now(self):
                return ntp_client.utcnow()
    """

    @abstractmethod
    def now(self) -> datetime:
        """
        Retorna o instante atual.

        Returns:
            datetime com timezone (UTC)
        """
        raise NotImplementedError


class SystemClock(Clock):
    """Relógio de parede em UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock(Clock):
    """
    Relógio parado, avançado manualmente.

    Útil para:
    - Testes unitários
    - Reprocessamento com data fixa

    Example:
        clock = FrozenClock(datetime(2024, 1, 1, tzinfo=timezone.utc))
        department = Department.create(..., clock=clock).value
        clock.advance(timedelta(minutes=5))
        department.set_active(False)
    """

    def __init__(self, instant: Optional[datetime] = None):
        self._instant = instant or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = instant

    def advance(self, delta: timedelta) -> datetime:
        """Avança o relógio e retorna o novo instante."""
        self._instant = self._instant + delta
        return self._instant


class IdGenerator(ABC):
    """Fonte de identidades geradas pelo próprio core."""

    @abstractmethod
    def new_id(self) -> uuid.UUID:
        raise NotImplementedError


class UUIDGenerator(IdGenerator):
    """UUID v4 aleatório."""

    def new_id(self) -> uuid.UUID:
        return uuid.uuid4()


class SequentialIdGenerator(IdGenerator):
    """
    Identidades previsíveis: UUID(int=1), UUID(int=2), ...

    Não usar em produção!
    """

    def __init__(self, start: int = 1):
        self._next = start

    def new_id(self) -> uuid.UUID:
        value = uuid.UUID(int=self._next)
        self._next += 1
        return value


def is_empty_id(value: Optional[uuid.UUID]) -> bool:
    """True para valores vazios (None, "") ou para o UUID nulo (00000000-...)."""
    return not value or (isinstance(value, uuid.UUID) and value.int == 0)
