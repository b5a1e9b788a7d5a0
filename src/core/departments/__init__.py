"""
Domínio de Departamentos - Estrutura Organizacional.

Contém o agregado central do diretório:
- Value Objects (DepartmentName, Identifier, Path)
- Entidades (Department, DepartmentLocation, DepartmentPosition)

Características do Domínio:
- Hierarquia via parent_id/path/depth (sem verificação de ciclos)
- Associações muitos-para-muitos com locais e cargos
- Validação na construção dos value objects
"""

from .value_objects import DepartmentName, Identifier, Path
from .entities import Department, DepartmentLocation, DepartmentPosition

__all__ = [
    # Value Objects
    "DepartmentName",
    "Identifier",
    "Path",
    # Entities
    "Department",
    "DepartmentLocation",
    "DepartmentPosition",
]
