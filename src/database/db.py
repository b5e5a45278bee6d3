from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from config.settings import DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False)
Base = declarative_base()


def init_db(bind=None):
    """Create all tables"""
    from . import models  # noqa: F401  registers the tables on Base.metadata
    Base.metadata.create_all(bind=bind or engine)
