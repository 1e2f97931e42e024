# nexus_cms/database.py

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one process.

    Built once at startup by the application lifespan and closed at shutdown;
    request handlers receive sessions through ``get_db``.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {}
        if url.startswith("sqlite"):
            # Sessions are handed to threadpool workers
            connect_args["check_same_thread"] = False
        self.url = url
        self.engine = create_engine(url, echo=echo, connect_args=connect_args)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def create_all(self):
        # Registers every model on Base.metadata
        import nexus_cms.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.SessionLocal()

    def close(self):
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
