"""Configuración del logging del servicio.

Un único handler a stdout en el logger raíz, con formato
`fecha - nivel - mensaje`. Los módulos usan `logging.getLogger(__name__)`.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Reinicia los handlers del logger raíz y fija el nivel indicado."""
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())
