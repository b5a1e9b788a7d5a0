"""
Configurações globais do Pytest para DirectService.

Este arquivo é carregado automaticamente pelo pytest e
fornece fixtures e configurações compartilhadas.
"""

from datetime import datetime, timezone
import sys
from pathlib import Path

import pytest

# Raiz do projeto no path para imports `src.*`
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))

from src.core.shared.interfaces import FrozenClock, SequentialIdGenerator  # noqa: E402
from src.core.departments.value_objects import (  # noqa: E402
    DepartmentName,
    Identifier,
    Path as DepartmentPath,
)
from src.core.locations.value_objects import Address, LocationName, TimeZone  # noqa: E402


CREATED_AT = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session")
def project_root():
    """Retorna o caminho raiz do projeto."""
    return root_path


@pytest.fixture
def clock():
    """Relógio parado em CREATED_AT."""
    return FrozenClock(CREATED_AT)


@pytest.fixture
def id_generator():
    """Ids previsíveis para associações."""
    return SequentialIdGenerator(start=1000)


@pytest.fixture
def department_name():
    return DepartmentName.create("Financeiro").value


@pytest.fixture
def identifier():
    return Identifier.create("financeiro").value


@pytest.fixture
def department_path():
    return DepartmentPath.create("empresa.financeiro").value


@pytest.fixture
def location_values():
    """Tupla (name, address, time_zone) válida."""
    return (
        LocationName.create("Sede São Paulo").value,
        Address.create("Av. Paulista, 1000").value,
        TimeZone.create("America/Sao_Paulo").value,
    )


@pytest.fixture(autouse=True)
def clean_container():
    """
    Reset do container global entre testes.

    Garante que cada teste inicia com estado limpo.
    """
    yield
    from src.config.container import reset_container as _reset

    _reset()


def pytest_configure(config):
    """Configuração do pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
