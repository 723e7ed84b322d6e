from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine

from app.core.config import settings


def connect_args_for(url: str, statement_timeout_ms: int = 0) -> dict:
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    if url.startswith("postgresql") and statement_timeout_ms > 0:
        # The server aborts any statement running past the deadline
        return {"options": f"-c statement_timeout={statement_timeout_ms}"}
    return {}


def build_engine(url: str, echo: bool = False, statement_timeout_ms: int = 0) -> Engine:
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        connect_args=connect_args_for(url, statement_timeout_ms),
    )


engine = build_engine(
    settings.database.sqlalchemy_url,
    echo=settings.database.echo,
    statement_timeout_ms=settings.database.statement_timeout_ms,
)


def create_db_and_tables(bind: Engine = engine):
    SQLModel.metadata.create_all(bind)
