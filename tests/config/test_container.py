"""
Testes para o Dependency Injection Container e logging.

Coverage:
- Seleção de Clock pela configuração
- Factories de entidade com clock/id_generator injetados
- get_container / reset_container
- configure_logging idempotente
"""

import logging
import uuid

import pytest
from dependency_injector import providers

from src.config import container as container_module
from src.config.container import Container, get_container, reset_container
from src.config.logging_config import configure_logging
from src.core.shared.interfaces import (
    FrozenClock,
    SequentialIdGenerator,
    SystemClock,
    UUIDGenerator,
)


INITIAL_CORE_LEVEL = logging.getLogger("src.core").level


class TestContainer:
    """Testes para Container."""

    def test_clock_default_e_system(self):
        container = Container()

        assert isinstance(container.clock(), SystemClock)
        assert isinstance(container.id_generator(), UUIDGenerator)

    def test_clock_frozen_por_configuracao(self):
        container = Container()
        container.config.from_dict({"clock": "frozen"})

        assert isinstance(container.clock(), FrozenClock)
        assert container.clock() is container.clock()

    def test_create_department_usa_dependencias_injetadas(
        self, clock, department_name, identifier, department_path
    ):
        container = Container()
        container.clock.override(providers.Object(clock))
        container.id_generator.override(providers.Object(SequentialIdGenerator(start=7)))

        result = container.create_department(
            department_id=uuid.uuid4(),
            parent_id=None,
            department_name=department_name,
            identifier=identifier,
            path=department_path,
            depth=0,
            location_ids=[uuid.uuid4()],
        )

        department = result.value
        assert department.created_at == clock.now()
        assert department.locations[0].id == uuid.UUID(int=7)

    def test_create_location_e_position(self, clock, location_values):
        container = Container()
        container.clock.override(providers.Object(clock))
        name, address, time_zone = location_values

        location = container.create_location(uuid.uuid4(), name, address, time_zone).value
        position = container.create_position(uuid.uuid4(), "Analista").value

        assert location.clock is clock
        assert position.created_at == clock.now()

    def test_create_position_propaga_erro(self):
        result = Container().create_position(uuid.uuid4(), "ab")

        assert result.is_failure


class TestContainerGlobal:
    """Testes para o container global."""

    def test_get_container_singleton(self):
        assert get_container() is get_container()

    def test_get_container_le_settings(self, monkeypatch):
        monkeypatch.setattr(container_module.settings, "CLOCK", "frozen")
        reset_container()

        assert isinstance(get_container().clock(), FrozenClock)

    def test_reset_container(self):
        first = get_container()
        reset_container()

        assert get_container() is not first


class TestLogging:
    """Testes para configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_core_level(self):
        """Devolve o nível original do logger src.core após cada teste."""
        logger = logging.getLogger("src.core")
        level = logger.level
        yield
        logger.setLevel(level)

    def test_configure_logging_aplica_nivel(self, monkeypatch):
        monkeypatch.setattr("src.config.logging_config._configured", False)

        configure_logging({
            "version": 1,
            "disable_existing_loggers": False,
            "loggers": {"src.core": {"level": "WARNING"}},
        })

        assert logging.getLogger("src.core").level == logging.WARNING

    def test_configure_logging_idempotente(self, monkeypatch):
        monkeypatch.setattr("src.config.logging_config._configured", True)
        logging.getLogger("src.core").setLevel(logging.ERROR)

        configure_logging()

        assert logging.getLogger("src.core").level == logging.ERROR

    def test_nivel_restaurado_entre_testes(self):
        """Os testes anteriores não deixam o logger src.core alterado."""
        assert logging.getLogger("src.core").level == INITIAL_CORE_LEVEL
