"""Aplicação da configuração de logging definida em settings.LOGGING."""

import logging
import logging.config
from typing import Optional

from . import settings

_configured = False


def configure_logging(config: Optional[dict] = None, force: bool = False) -> None:
    """
    Aplica dictConfig uma única vez por processo.

    Args:
        config: Dicionário dictConfig (default: settings.LOGGING)
        force: Reaplica mesmo se já configurado
    """
    global _configured

    if _configured and not force:
        return

    logging.config.dictConfig(config or settings.LOGGING)
    _configured = True
    logging.getLogger(__name__).debug("Logging configurado (nível %s)", settings.LOG_LEVEL)
