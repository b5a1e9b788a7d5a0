"""
Settings do DirectService.

Usa variáveis de ambiente (carregadas de .env quando existir)
para tudo que muda entre ambientes.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Carregar variáveis de ambiente
load_dotenv()

# =============================================================================
# Caminhos Base
# =============================================================================

BASE_DIR = Path(__file__).resolve().parent.parent.parent

# src/ directory
SRC_DIR = BASE_DIR / 'src'

# =============================================================================
# Domínio
# =============================================================================

# 'system' = SystemClock (produção)
# 'frozen' = FrozenClock (testes/reprocessamento)
CLOCK = os.getenv('DIRECTSERVICE_CLOCK', 'system').lower()

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.core': {
            'handlers': ['console'],
            'level': 'DEBUG',
            'propagate': False,
        },
        'src.config': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
