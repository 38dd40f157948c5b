"""
Configuration du logging du webshop via loguru.

Deux sinks, alimentes par les seuls messages du package webshop :
- stderr : ligne courte et coloree, au niveau WEBSHOP_LOG_LEVEL
- fichier : JSON avec rotation, tout niveau, chaque enregistrement portant
  la base de donnees utilisee (extra "database")
"""

import sys

from loguru import logger

from webshop.config import Settings

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> "
    "<level>{level: <8}</level> "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def _from_webshop(record: dict) -> bool:
    """Ecarte les messages emis hors du package webshop."""
    return (record["name"] or "").split(".", 1)[0] == "webshop"


def configure_logging(settings: Settings) -> None:
    """
    Configure loguru a partir des parametres de l'application.

    Args:
        settings: Parametres charges (niveau, fichier, rotation, retention)
    """
    logger.remove()
    logger.configure(extra={"database": settings.database_url})

    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format=CONSOLE_FORMAT,
        filter=_from_webshop,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        filter=_from_webshop,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(f"Logs ecrits dans {settings.log_file}")
