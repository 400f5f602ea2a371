from sqlmodel import Session, create_engine
from sqlalchemy.pool import StaticPool

from app.configuration.settings import Configuration

configuration = Configuration()

database_url = configuration.get_database_url()

if database_url.startswith("sqlite"):
    # SQLite em memória precisa de uma única conexão compartilhada entre threads
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool if database_url in ("sqlite://", "sqlite:///:memory:") else None,
    )
else:
    engine = create_engine(database_url, pool_pre_ping=True)


def get_session():
    with Session(engine) as session:
        yield session
