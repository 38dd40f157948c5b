"""
Configuration de la base de donnees SQLite pour le webshop.

Ce module fournit :
- Engine SQLite cree a la demande, cles etrangeres actives
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via WEBSHOP_DATABASE_URL (defaut: sqlite:///data/webshop.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from sqlalchemy import Engine, event
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def _set_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_foreign_keys(engine: Engine) -> Engine:
    """
    Active PRAGMA foreign_keys sur chaque connexion SQLite de l'engine.

    SQLite n'applique pas les contraintes FOREIGN KEY sans ce pragma,
    qui doit etre pose connexion par connexion.
    """
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _set_sqlite_foreign_keys)
    return engine


def get_engine() -> Engine:
    """
    Retourne l'engine SQLite, en le creant si necessaire.

    Utilise la configuration de l'application pour le chemin de la BDD.
    """
    global _engine
    if _engine is None:
        from webshop.config import Settings
        settings = Settings()

        # Creer le repertoire parent si l'URL est un fichier SQLite
        db_url = settings.database_url
        if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
            db_path = Path(db_url.replace("sqlite:///", ""))
            db_path.parent.mkdir(exist_ok=True, parents=True)

        _engine = enable_foreign_keys(
            create_engine(
                db_url,
                echo=False,
                connect_args={"check_same_thread": False},
            )
        )
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Yields:
        Session SQLModel connectee a l'engine SQLite
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.
    Doit etre appelee une fois au demarrage de l'application.
    """
    from webshop.infrastructure.persistence import models  # noqa: F401

    SQLModel.metadata.create_all(get_engine())
