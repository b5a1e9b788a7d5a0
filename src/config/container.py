"""
Dependency Injection Container.

Configura as capacidades que o core recebe de fora (relógio e
gerador de ids) e expõe as factories das entidades já ligadas
a elas. Usa dependency-injector.

Padrões:
- Selector: escolhe a implementação de Clock pela configuração
- Singleton: uma instância de Clock/IdGenerator por container
- Callable: factories de entidade com clock/id_generator injetados
"""

import logging
from typing import Optional

from dependency_injector import containers, providers

from src.core.departments.entities import Department
from src.core.locations.entities import Location
from src.core.positions.entities import Position
from src.core.shared.interfaces import FrozenClock, SystemClock, UUIDGenerator

from . import settings

logger = logging.getLogger(__name__)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Example:
        from src.config.container import Container

        container = Container()
        container.config.from_dict({'clock': 'frozen'})

        result = container.create_department(
            department_id=uuid.uuid4(),
            parent_id=None,
            department_name=name,
            identifier=identifier,
            path=path,
            depth=0,
        )
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration(default={'clock': 'system'})

    # =========================================================================
    # Capacidades do Core
    # =========================================================================

    clock = providers.Selector(
        config.clock,
        system=providers.Singleton(SystemClock),
        frozen=providers.Singleton(FrozenClock),
    )

    id_generator = providers.Singleton(UUIDGenerator)

    # =========================================================================
    # Factories de Entidades
    # =========================================================================

    create_department = providers.Callable(
        Department.create,
        clock=clock,
        id_generator=id_generator,
    )

    create_location = providers.Callable(
        Location.create,
        clock=clock,
    )

    create_position = providers.Callable(
        Position.create,
        clock=clock,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna instância global do container.

    Cria se não existir, lendo settings.CLOCK.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict({'clock': settings.CLOCK})
        logger.debug(
            "Container criado: clock=%s id_generator=%s",
            type(_container.clock()).__name__,
            type(_container.id_generator()).__name__,
        )

    return _container


def reset_container() -> None:
    """Reset do container (para testes)."""
    global _container
    _container = None
