from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from food_orders.adapters.db.sqlalchemy.models import Base
from food_orders.config import Settings


def build_engine(settings: Settings) -> Engine:
    return create_engine(settings.database_url, echo=settings.sql_echo)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=True, bind=engine)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)
