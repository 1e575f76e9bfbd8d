from sqlmodel import Session, create_engine
from itemrequest.core.config import settings

engine = create_engine(settings.database_url, echo=settings.debug, pool_pre_ping=True)


def get_session():
    """Dependency to get database session; one unit of work per HTTP call."""
    with Session(engine) as session:
        yield session
