from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker

from weatherdash.core.config import settings


def _connect_args(database_url: str, ssl_ca: str | None) -> dict:
    """
    Driver-specific connection arguments.
    - sqlite: allow the connection to be used outside the creating thread
    - postgresql / mysql: TLS verified against the CA bundle in DB_SSL_CA
    """
    backend = make_url(database_url).get_backend_name()

    if backend == "sqlite":
        return {"check_same_thread": False}

    if not ssl_ca:
        return {}

    if backend == "postgresql":
        return {"sslmode": "verify-full", "sslrootcert": ssl_ca}
    if backend == "mysql":
        return {"ssl": {"ca": ssl_ca}}
    return {}


engine = create_engine(
    settings.DATABASE_URL,
    connect_args=_connect_args(settings.DATABASE_URL, settings.DB_SSL_CA),
    pool_pre_ping=True,
)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
