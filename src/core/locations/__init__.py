"""
Domínio de Locais.

- Value Objects (LocationName, Address, TimeZone)
- Entidade Location (referências de volta para departamentos)
"""

from .value_objects import LocationName, Address, TimeZone
from .entities import Location

__all__ = [
    "LocationName",
    "Address",
    "TimeZone",
    "Location",
]
