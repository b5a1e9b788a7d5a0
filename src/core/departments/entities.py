"""
Entidades do Domínio de Departamentos.

Este módulo define o agregado central da estrutura organizacional
e os registros de associação que ele possui.

Entidades:
- Department: Agregado principal (hierarquia + associações)
- DepartmentLocation: Associação Departamento ↔ Local
- DepartmentPosition: Associação Departamento ↔ Cargo

Regras de Negócio Encapsuladas:
- ID obrigatório (não nulo) na criação
- Uma associação por id informado, com identidade gerada pelo core
- Associações são aditivas: o mesmo local/cargo pode aparecer duas vezes
- Remoção pelo id estrangeiro, apenas a primeira ocorrência

O que NÃO é verificado aqui:
- Ciclos na hierarquia (parent_id)
- Coerência entre depth e a posição real na árvore
- Unicidade de ids (responsabilidade da persistência)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple
import uuid

from src.core.shared.errors import Error
from src.core.shared.interfaces import (
    Clock,
    IdGenerator,
    SystemClock,
    UUIDGenerator,
    is_empty_id,
)
from src.core.shared.result import Result

from .value_objects import DepartmentName, Identifier, Path

if TYPE_CHECKING:
    from src.core.locations.entities import Location
    from src.core.positions.entities import Position


def _as_uuid(value: Any) -> uuid.UUID:
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def _as_datetime(value: Any) -> datetime:
    return value if isinstance(value, datetime) else datetime.fromisoformat(value)


@dataclass(frozen=True, eq=False)
class DepartmentLocation:
    """
    Registro de associação Departamento ↔ Local.

    Identidade própria (gerada), não o par (departamento, local).

    Attributes:
        id: Identidade do registro
        department: Departamento dono da associação
        location_id: Local associado
        created_at: Momento da associação (imutável)
    """

    id: uuid.UUID
    department: "Department" = field(repr=False)
    location_id: uuid.UUID
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "department_id": str(self.department.id),
            "location_id": str(self.location_id),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True, eq=False)
class DepartmentPosition:
    """Registro de associação Departamento ↔ Cargo."""

    id: uuid.UUID
    department: "Department" = field(repr=False)
    position_id: uuid.UUID
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": str(self.id),
            "department_id": str(self.department.id),
            "position_id": str(self.position_id),
            "created_at": self.created_at.isoformat(),
        }


@dataclass(eq=False)
class Department:
    """
    Entidade de Domínio: Departamento.

    Agregado central da estrutura organizacional. Possui as
    associações com locais e cargos; Location e Position só
    guardam referências de navegação de volta.

    Invariantes:
    - id não nulo (verificado apenas na criação)
    - updated_at é None até a primeira mutação
    - Ativo/Inativo não bloqueia nenhuma outra operação

    Attributes:
        id: Identificador único (fornecido pelo chamador)
        department_name: Nome de exibição
        identifier: Slug em letras latinas
        path: Caminho materializado na árvore
        parent_id: Departamento pai (None para raiz)
        depth: Profundidade informada pelo chamador
        is_active: Estado de atividade
        created_at: Data/hora de criação
        updated_at: Data/hora da última mutação
        clock: Fonte de tempo usada nas mutações
        id_generator: Fonte de ids das associações

    Example:
        department = Department.create(
            department_id=uuid.uuid4(),
            parent_id=None,
            department_name=DepartmentName.create("Financeiro").value,
            identifier=Identifier.create("financeiro").value,
            path=Path.create("financeiro").value,
            depth=0,
            location_ids=[sede_id],
            position_ids=[analista_id],
        ).value

        department.set_active(False)
    """

    id: uuid.UUID
    department_name: DepartmentName
    identifier: Identifier
    path: Path
    parent_id: Optional[uuid.UUID] = None
    depth: int = 0
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    clock: Clock = field(default_factory=SystemClock, repr=False)
    id_generator: IdGenerator = field(default_factory=UUIDGenerator, repr=False)

    _locations: List[DepartmentLocation] = field(
        default_factory=list, init=False, repr=False
    )
    _positions: List[DepartmentPosition] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = self.clock.now()

    @classmethod
    def create(
        cls,
        department_id: uuid.UUID,
        parent_id: Optional[uuid.UUID],
        department_name: DepartmentName,
        identifier: Identifier,
        path: Path,
        depth: int,
        location_ids: Iterable[uuid.UUID] = (),
        position_ids: Iterable[uuid.UUID] = (),
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ) -> Result["Department"]:
        """
        Factory method para criar departamento com validações.

        Cria uma associação para cada id de local e de cargo
        informado, cada uma com identidade nova e o instante atual.

        Args:
            department_id: ID do departamento (não nulo)
            parent_id: ID do departamento pai ou None
            department_name: Nome já validado
            identifier: Identificador já validado
            path: Caminho na árvore
            depth: Profundidade na árvore
            location_ids: Locais iniciais
            position_ids: Cargos iniciais
            clock: Fonte de tempo (default: SystemClock)
            id_generator: Fonte de ids (default: UUIDGenerator)

        Returns:
            Result com o Department, ou erro VALIDATION se id vazio
        """
        if is_empty_id(department_id):
            return Result.fail(Error.validation("ID é obrigatório", "id"))

        department = cls(
            id=department_id,
            department_name=department_name,
            identifier=identifier,
            path=path,
            parent_id=parent_id,
            depth=depth,
            is_active=True,
            clock=clock or SystemClock(),
            id_generator=id_generator or UUIDGenerator(),
        )
        department.set_locations(location_ids)
        department.set_positions(position_ids)

        return Result.success(department)

    @classmethod
    def from_persisted(
        cls,
        department_id: uuid.UUID,
        department_name: DepartmentName,
        identifier: Identifier,
        path: Path,
        parent_id: Optional[uuid.UUID],
        depth: int,
        is_active: bool,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        locations: Iterable[Mapping[str, Any]] = (),
        positions: Iterable[Mapping[str, Any]] = (),
        clock: Optional[Clock] = None,
        id_generator: Optional[IdGenerator] = None,
    ) -> "Department":
        """
        Reidrata departamento já persistido, sem validação.

        Args:
            locations: Linhas com "id", "location_id", "created_at"
            positions: Linhas com "id", "position_id", "created_at"

        As linhas podem trazer valores tipados (UUID/datetime) ou as
        strings produzidas por to_dict().

        Returns:
            Department exatamente como armazenado
        """
        department = cls(
            id=department_id,
            department_name=department_name,
            identifier=identifier,
            path=path,
            parent_id=parent_id,
            depth=depth,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            clock=clock or SystemClock(),
            id_generator=id_generator or UUIDGenerator(),
        )
        department._locations = [
            DepartmentLocation(
                id=_as_uuid(row["id"]),
                department=department,
                location_id=_as_uuid(row["location_id"]),
                created_at=_as_datetime(row["created_at"]),
            )
            for row in locations
        ]
        department._positions = [
            DepartmentPosition(
                id=_as_uuid(row["id"]),
                department=department,
                position_id=_as_uuid(row["position_id"]),
                created_at=_as_datetime(row["created_at"]),
            )
            for row in positions
        ]
        return department

    # =========================================================================
    # Coleções (somente leitura)
    # =========================================================================

    @property
    def locations(self) -> Tuple[DepartmentLocation, ...]:
        return tuple(self._locations)

    @property
    def positions(self) -> Tuple[DepartmentPosition, ...]:
        return tuple(self._positions)

    @property
    def location_ids(self) -> List[uuid.UUID]:
        """Ids de locais na ordem de associação (com repetições)."""
        return [link.location_id for link in self._locations]

    @property
    def position_ids(self) -> List[uuid.UUID]:
        return [link.position_id for link in self._positions]

    # =========================================================================
    # Mutações
    # =========================================================================

    def update(
        self,
        department_name: DepartmentName,
        identifier: Identifier,
        parent_id: Optional[uuid.UUID],
        path: Path,
        depth: int,
        is_active: bool,
    ) -> Result["Department"]:
        """
        Sobrescreve todos os campos editáveis.

        Sempre bem-sucedido: os value objects já chegam validados.
        """
        self.department_name = department_name
        self.identifier = identifier
        self.parent_id = parent_id
        self.path = path
        self.depth = depth
        self.is_active = is_active
        self._atualizar_timestamp()

        return Result.success(self)

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self._atualizar_timestamp()

    def set_parent(self, parent_id: Optional[uuid.UUID]) -> None:
        """
        Troca o departamento pai.

        Não verifica ciclos: o chamador garante que parent_id
        não é o próprio departamento nem um descendente.
        """
        self.parent_id = parent_id
        self._atualizar_timestamp()

    def set_positions(self, position_ids: Iterable[uuid.UUID]) -> None:
        """
        Adiciona uma associação por id de cargo.

        Aditivo: não remove as existentes nem elimina duplicatas.
        """
        for position_id in position_ids:
            self._positions.append(
                DepartmentPosition(
                    id=self.id_generator.new_id(),
                    department=self,
                    position_id=position_id,
                    created_at=self.clock.now(),
                )
            )

    def set_locations(self, location_ids: Iterable[uuid.UUID]) -> None:
        """Adiciona uma associação por id de local (aditivo)."""
        for location_id in location_ids:
            self._locations.append(
                DepartmentLocation(
                    id=self.id_generator.new_id(),
                    department=self,
                    location_id=location_id,
                    created_at=self.clock.now(),
                )
            )

    def delete_positions(self, position: "Position") -> Result[uuid.UUID]:
        """
        Remove a primeira associação com o cargo informado.

        Returns:
            Result com o id do cargo removido, ou NOT_FOUND
        """
        for index, link in enumerate(self._positions):
            if link.position_id == position.id:
                del self._positions[index]
                return Result.success(link.position_id)

        return Result.fail(Error.not_found(
            f"Cargo {position.id} não está associado ao departamento"
        ))

    def delete_locations(self, location: "Location") -> Result[uuid.UUID]:
        """
        Remove a primeira associação com o local informado.

        Returns:
            Result com o id do local removido, ou NOT_FOUND
        """
        for index, link in enumerate(self._locations):
            if link.location_id == location.id:
                del self._locations[index]
                return Result.success(link.location_id)

        return Result.fail(Error.not_found(
            f"Local {location.id} não está associado ao departamento"
        ))

    def _atualizar_timestamp(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = self.clock.now()

    # =========================================================================
    # Serialização / Identidade
    # =========================================================================

    @property
    def is_root(self) -> bool:
        return self.parent_id is None

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot das propriedades persistidas."""
        return {
            "id": str(self.id),
            "department_name": self.department_name.value,
            "identifier": self.identifier.value,
            "path": self.path.value,
            "parent_id": str(self.parent_id) if self.parent_id else None,
            "depth": self.depth,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "locations": [link.to_dict() for link in self._locations],
            "positions": [link.to_dict() for link in self._positions],
        }

    def __repr__(self) -> str:
        """Representação string para debugging."""
        return (
            f"Department("
            f"id={str(self.id)[:8]}..., "
            f"identifier='{self.identifier.value}', "
            f"depth={self.depth}, "
            f"is_active={self.is_active}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Department):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash baseado em ID."""
        return hash(self.id)
