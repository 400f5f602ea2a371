import logging
from sqlmodel import Session, SQLModel

from app.database.connection import engine
from app.database.populate import populate_database

# Registra as tabelas no metadata antes do create_all
import app.models  # noqa: F401


def init_db():
    SQLModel.metadata.create_all(engine)
    logging.info("BANCO DE DADOS >>> Tabelas verificadas/criadas")

    with Session(engine) as session:
        populate_database(session)
