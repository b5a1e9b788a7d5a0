"""
Entidades do Domínio de Locais.

Entidades:
- Location: Sede/filial física onde departamentos operam

Location guarda apenas referências de navegação para os
departamentos (não é dona da associação; quem cria
DepartmentLocation é o Department).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple
import uuid

from src.core.shared.errors import Error
from src.core.shared.interfaces import Clock, SystemClock, is_empty_id
from src.core.shared.result import Result

from .value_objects import Address, LocationName, TimeZone

if TYPE_CHECKING:
    from src.core.departments.entities import Department


@dataclass(eq=False)
class Location:
    """
    Entidade de Domínio: Local.

    Invariantes:
    - id não nulo (verificado apenas na criação)
    - updated_at é None até a primeira mutação

    Attributes:
        id: Identificador único (fornecido pelo chamador)
        name: Nome do local
        address: Endereço
        time_zone: Fuso horário
        is_active: Estado de atividade
        created_at: Data/hora de criação
        updated_at: Data/hora da última mutação

    Example:
        location = Location.create(
            location_id=uuid.uuid4(),
            name=LocationName.create("Sede São Paulo").value,
            address=Address.create("Av. Paulista, 1000").value,
            time_zone=TimeZone.create("America/Sao_Paulo").value,
        ).value

        location.set_departments(financeiro)
    """

    id: uuid.UUID
    name: LocationName
    address: Address
    time_zone: TimeZone
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    clock: Clock = field(default_factory=SystemClock, repr=False)

    _departments: List["Department"] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = self.clock.now()

    @classmethod
    def create(
        cls,
        location_id: uuid.UUID,
        name: LocationName,
        address: Address,
        time_zone: TimeZone,
        clock: Optional[Clock] = None,
    ) -> Result["Location"]:
        """
        Factory method para criar local.

        Returns:
            Result com o Location, ou erro VALIDATION se id vazio
        """
        if is_empty_id(location_id):
            return Result.fail(Error.validation("ID é obrigatório", "id"))

        return Result.success(cls(
            id=location_id,
            name=name,
            address=address,
            time_zone=time_zone,
            is_active=True,
            clock=clock or SystemClock(),
        ))

    @classmethod
    def from_persisted(
        cls,
        location_id: uuid.UUID,
        name: LocationName,
        address: Address,
        time_zone: TimeZone,
        is_active: bool,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        departments: Iterable["Department"] = (),
        clock: Optional[Clock] = None,
    ) -> "Location":
        """Reidrata local já persistido, sem validação."""
        location = cls(
            id=location_id,
            name=name,
            address=address,
            time_zone=time_zone,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            clock=clock or SystemClock(),
        )
        location._departments = list(departments)
        return location

    @property
    def departments(self) -> Tuple["Department", ...]:
        return tuple(self._departments)

    @property
    def department_ids(self) -> List[uuid.UUID]:
        return [department.id for department in self._departments]

    def update(
        self,
        name: LocationName,
        address: Address,
        time_zone: TimeZone,
    ) -> Result["Location"]:
        """Sobrescreve nome, endereço e fuso. Sempre bem-sucedido."""
        self.name = name
        self.address = address
        self.time_zone = time_zone
        self._atualizar_timestamp()

        return Result.success(self)

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self._atualizar_timestamp()

    def set_departments(self, department: "Department") -> None:
        """
        Registra referência de volta para um departamento.

        Não cria DepartmentLocation; isso é feito pelo Department.
        """
        self._departments.append(department)
        self._atualizar_timestamp()

    def delete_departments(self, department: "Department") -> Result[uuid.UUID]:
        """
        Remove a primeira referência ao departamento informado.

        Returns:
            Result com o id do departamento, ou NOT_FOUND
        """
        for index, current in enumerate(self._departments):
            if current.id == department.id:
                del self._departments[index]
                self._atualizar_timestamp()
                return Result.success(current.id)

        return Result.fail(Error.not_found(
            f"Departamento {department.id} não está vinculado ao local"
        ))

    def _atualizar_timestamp(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = self.clock.now()

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot das propriedades persistidas."""
        return {
            "id": str(self.id),
            "name": self.name.value,
            "address": self.address.value,
            "time_zone": self.time_zone.value,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "department_ids": [str(department_id) for department_id in self.department_ids],
        }

    def __repr__(self) -> str:
        return (
            f"Location("
            f"id={str(self.id)[:8]}..., "
            f"name='{self.name.value[:20]}', "
            f"is_active={self.is_active}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Location):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
