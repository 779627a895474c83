# boutique/database.py
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from boutique.core.config import get_settings

settings = get_settings()


def build_engine(db_url: str, echo: bool = False) -> Engine:
    """
    Build the process-wide engine (connection pool) for a database URL.

    - Postgres: append sslmode=require if it is not already present and
      validate pooled connections before use.
    - SQLite: allow the pooled connection to be used from FastAPI's
      worker threads.
    """
    if db_url.startswith("sqlite"):
        return create_engine(
            db_url,
            echo=echo,
            connect_args={"check_same_thread": False},
        )

    if db_url.startswith("postgresql") and "sslmode=" not in db_url:
        separator = "&" if "?" in db_url else "?"
        db_url = f"{db_url}{separator}sslmode=require"

    return create_engine(
        db_url,
        echo=echo,
        pool_pre_ping=True,
    )


# Built once at import and shared read-only by every request.
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)


def create_db_and_tables(bind: Engine | None = None) -> None:
    """Create any missing boutique tables on `bind` (the app engine by default)."""
    SQLModel.metadata.create_all(bind or engine)


def get_session():
    """One session per request, closed when the response is sent."""
    with Session(engine) as session:
        yield session
