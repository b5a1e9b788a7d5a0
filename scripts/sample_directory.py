#!/usr/bin/env python
"""
Monta um diretório organizacional de exemplo em memória.

Este script:
1. Configura logging
2. Cria locais, cargos e departamentos via container
3. Liga as referências de volta (Location/Position → Department)
4. Imprime o snapshot em JSON

Uso:
    python scripts/sample_directory.py
    python scripts/sample_directory.py --frozen-clock
"""

import argparse
import json
import logging
import os
import sys
import uuid

# Adicionar raiz do projeto ao path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.config.container import get_container  # noqa: E402
from src.config.logging_config import configure_logging  # noqa: E402
from src.core.departments import DepartmentName, Identifier, Path  # noqa: E402
from src.core.locations import Address, LocationName, TimeZone  # noqa: E402

logger = logging.getLogger("scripts.sample_directory")


SAMPLE_LOCATIONS = [
    ("Sede São Paulo", "Av. Paulista, 1000", "America/Sao_Paulo"),
    ("Filial Recife", "Rua da Aurora, 10", "America/Recife"),
]

SAMPLE_POSITIONS = [
    ("Analista Financeiro", "Conciliação e contas a pagar"),
    ("Gerente de TI", None),
]

SAMPLE_DEPARTMENTS = [
    # (nome, identifier, path, depth, índice do pai)
    ("Diretoria", "diretoria", "diretoria", 0, None),
    ("Financeiro", "financeiro", "diretoria.financeiro", 1, 0),
    ("Tecnologia", "tecnologia", "diretoria.tecnologia", 1, 0),
]


def _unwrap(result, label):
    if result.is_failure:
        logger.error("Falha ao criar %s: %s", label, result.error)
        sys.exit(1)
    return result.value


def build_directory():
    """Cria as entidades de exemplo e retorna (departments, locations, positions)."""
    container = get_container()

    locations = []
    for name, address, time_zone in SAMPLE_LOCATIONS:
        location = _unwrap(
            LocationName.create(name).bind(
                lambda n: Address.create(address).bind(
                    lambda a: TimeZone.create(time_zone).bind(
                        lambda tz: container.create_location(uuid.uuid4(), n, a, tz)
                    )
                )
            ),
            f"local '{name}'",
        )
        locations.append(location)

    positions = [
        _unwrap(container.create_position(uuid.uuid4(), name, description), f"cargo '{name}'")
        for name, description in SAMPLE_POSITIONS
    ]

    departments = []
    for name, slug, path, depth, parent_index in SAMPLE_DEPARTMENTS:
        parent_id = departments[parent_index].id if parent_index is not None else None
        department = _unwrap(
            container.create_department(
                department_id=uuid.uuid4(),
                parent_id=parent_id,
                department_name=_unwrap(DepartmentName.create(name), "nome"),
                identifier=_unwrap(Identifier.create(slug), "identifier"),
                path=_unwrap(Path.create(path), "path"),
                depth=depth,
                location_ids=[locations[0].id],
                position_ids=[position.id for position in positions],
            ),
            f"departamento '{name}'",
        )
        departments.append(department)

        locations[0].set_departments(department)
        for position in positions:
            position.set_department(department)

        logger.info("Departamento criado: %r", department)

    return departments, locations, positions


def main():
    parser = argparse.ArgumentParser(description='Diretório organizacional de exemplo')
    parser.add_argument(
        '--frozen-clock',
        action='store_true',
        help='Usar FrozenClock (timestamps determinísticos)'
    )

    args = parser.parse_args()

    configure_logging()

    if args.frozen_clock:
        get_container().config.from_dict({'clock': 'frozen'})

    departments, locations, positions = build_directory()

    snapshot = {
        'departments': [department.to_dict() for department in departments],
        'locations': [location.to_dict() for location in locations],
        'positions': [position.to_dict() for position in positions],
    }
    print(json.dumps(snapshot, indent=2, ensure_ascii=False))


if __name__ == '__main__':
    main()
