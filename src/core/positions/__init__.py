"""
Domínio de Cargos.

- Entidade Position (nome/descrição validados pela própria entidade)
"""

from .entities import Position

__all__ = ["Position"]
