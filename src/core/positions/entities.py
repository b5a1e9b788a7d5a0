"""
Entidades do Domínio de Cargos.

Entidades:
- Position: Cargo/função que pode ser atribuído a departamentos

Diferente de Department e Location, os campos de Position são
strings simples validadas pela própria entidade, tanto em
create() quanto em update().
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple
import uuid

from src.core.shared.errors import Error
from src.core.shared.interfaces import Clock, SystemClock, is_empty_id
from src.core.shared.result import Result

if TYPE_CHECKING:
    from src.core.departments.entities import Department


@dataclass(eq=False)
class Position:
    """
    Entidade de Domínio: Cargo.

    Invariantes:
    - id não nulo (verificado apenas na criação)
    - Nome com 3 a 100 caracteres
    - Descrição opcional com no máximo 1000 caracteres
    - update() inválido não altera o estado

    Attributes:
        id: Identificador único (fornecido pelo chamador)
        name: Título do cargo
        description: Descrição opcional
        is_active: Estado de atividade
        created_at: Data/hora de criação
        updated_at: Data/hora da última mutação

    Example:
        position = Position.create(
            position_id=uuid.uuid4(),
            name="Analista Financeiro",
            description="Responsável por conciliações",
        ).value

        position.update("Analista Financeiro Sr", None)
    """

    id: uuid.UUID
    name: str
    description: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    clock: Clock = field(default_factory=SystemClock, repr=False)

    _departments: List["Department"] = field(
        default_factory=list, init=False, repr=False
    )

    # Constantes de validação
    NAME_MIN_LENGTH = 3
    NAME_MAX_LENGTH = 100
    DESCRIPTION_MAX_LENGTH = 1000

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = self.clock.now()

    @classmethod
    def create(
        cls,
        position_id: uuid.UUID,
        name: str,
        description: Optional[str] = None,
        clock: Optional[Clock] = None,
    ) -> Result["Position"]:
        """
        Factory method para criar cargo com validações.

        Args:
            position_id: ID do cargo (não nulo)
            name: Título (3-100 caracteres)
            description: Descrição opcional (máx. 1000 caracteres)
            clock: Fonte de tempo (default: SystemClock)

        Returns:
            Result com o Position, ou erro VALIDATION
        """
        if is_empty_id(position_id):
            return Result.fail(Error.validation("ID é obrigatório", "id"))

        error = cls._validar_campos(name, description)
        if error is not None:
            return Result.fail(error)

        return Result.success(cls(
            id=position_id,
            name=name,
            description=description,
            is_active=True,
            clock=clock or SystemClock(),
        ))

    @classmethod
    def from_persisted(
        cls,
        position_id: uuid.UUID,
        name: str,
        description: Optional[str],
        is_active: bool,
        created_at: datetime,
        updated_at: Optional[datetime] = None,
        departments: Iterable["Department"] = (),
        clock: Optional[Clock] = None,
    ) -> "Position":
        """Reidrata cargo já persistido, sem validação."""
        position = cls(
            id=position_id,
            name=name,
            description=description,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            clock=clock or SystemClock(),
        )
        position._departments = list(departments)
        return position

    @classmethod
    def _validar_campos(
        cls, name: Optional[str], description: Optional[str]
    ) -> Optional[Error]:
        """Valida nome e descrição; retorna o primeiro erro encontrado."""
        if (
            name is None
            or not name.strip()
            or len(name) < cls.NAME_MIN_LENGTH
            or len(name) > cls.NAME_MAX_LENGTH
        ):
            return Error.validation(
                f"Nome deve ter entre {cls.NAME_MIN_LENGTH} e {cls.NAME_MAX_LENGTH} caracteres",
                "name",
            )

        # Descrição em branco é tratada como ausente
        if (
            description is not None
            and description.strip()
            and len(description) > cls.DESCRIPTION_MAX_LENGTH
        ):
            return Error.validation(
                f"Descrição deve ter no máximo {cls.DESCRIPTION_MAX_LENGTH} caracteres",
                "description",
            )

        return None

    @property
    def departments(self) -> Tuple["Department", ...]:
        return tuple(self._departments)

    @property
    def department_ids(self) -> List[uuid.UUID]:
        return [department.id for department in self._departments]

    def update(self, name: str, description: Optional[str]) -> Result["Position"]:
        """
        Atualiza nome e descrição com as mesmas regras de create().

        Em caso de erro o estado permanece intacto (inclusive updated_at).
        """
        error = self._validar_campos(name, description)
        if error is not None:
            return Result.fail(error)

        self.name = name
        self.description = description
        self._atualizar_timestamp()

        return Result.success(self)

    def set_active(self, active: bool) -> None:
        self.is_active = active
        self._atualizar_timestamp()

    def set_department(self, department: "Department") -> None:
        """Registra referência de volta para um departamento."""
        self._departments.append(department)

    def delete_department(self, department: "Department") -> Result[uuid.UUID]:
        """
        Remove a primeira referência ao departamento informado.

        Não altera updated_at.

        Returns:
            Result com o id do departamento, ou NOT_FOUND
        """
        for index, current in enumerate(self._departments):
            if current.id == department.id:
                del self._departments[index]
                return Result.success(current.id)

        return Result.fail(Error.not_found(
            f"Departamento {department.id} não está vinculado ao cargo"
        ))

    def _atualizar_timestamp(self) -> None:
        """Atualiza timestamp de modificação."""
        self.updated_at = self.clock.now()

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot das propriedades persistidas."""
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "department_ids": [str(department_id) for department_id in self.department_ids],
        }

    def __repr__(self) -> str:
        return (
            f"Position("
            f"id={str(self.id)[:8]}..., "
            f"name='{self.name[:20]}', "
            f"is_active={self.is_active}"
            f")"
        )

    def __eq__(self, other: object) -> bool:
        """Comparação por ID (identidade de entidade)."""
        if not isinstance(other, Position):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
