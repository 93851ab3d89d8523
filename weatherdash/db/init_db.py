from weatherdash.db.base import Base
from weatherdash.db.session import engine

# registers the tables on Base.metadata
from weatherdash.models import device, reading  # noqa: F401


def init_db():
    Base.metadata.create_all(bind=engine)
