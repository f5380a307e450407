'''
Module de configuration pour le logger centralisé de l'application.

Ce module utilise Loguru pour fournir un logger pré-configuré avec des sorties
vers la console (avec couleurs) et des fichiers rotatifs.
'''

import sys
import os
from loguru import logger

from spellpy.config import settings

# ==============================================================================
# Configuration de Loguru
# ==============================================================================

# 1. Supprimer le handler par défaut pour éviter les doublons
logger.remove()

# 2. Définir les formats pour les logs
LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)

# 3. Sortie console (stderr)
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format=LOG_FORMAT_CONSOLE,
    colorize=True,
    backtrace=True,
    diagnose=True
)

# 4. Fichiers : rotation journalière, conservation de 30 jours, compression.
#    (nom du fichier, niveau minimal, niveaux retenus ou None pour tout garder)
LOG_FILES = (
    ("debug.log", "DEBUG", ("DEBUG",)),
    ("info.log", "INFO", ("INFO", "WARNING")),
    ("error.log", "ERROR", None),
)


def _level_filter(levels):
    if levels is None:
        return None
    return lambda record: record["level"].name in levels


if settings.LOG_TO_FILE:
    os.makedirs(settings.LOG_DIR, exist_ok=True)
    for filename, level, levels in LOG_FILES:
        logger.add(
            os.path.join(settings.LOG_DIR, filename),
            level=level,
            format=LOG_FORMAT_FILE,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8",
            filter=_level_filter(levels),
            backtrace=levels is None,
            diagnose=levels is None,
        )
