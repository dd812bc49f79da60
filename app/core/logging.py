"""
Logging de la app - nivel según configuración
"""

import logging
from typing import Optional

from app.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configura el logger raíz con el nivel del .env (DEBUG si debug=True)"""
    settings = settings or get_settings()

    level = logging.DEBUG if settings.debug else getattr(
        logging, settings.log_level.upper(), logging.INFO
    )

    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("app").setLevel(level)
