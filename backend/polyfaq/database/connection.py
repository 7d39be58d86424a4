# polyfaq/database/connection.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base

# Base class for models
Base = declarative_base()

def build_engine(database_url: str, **kwargs) -> Engine:
    if database_url.startswith("sqlite"):
        # SQLite connections are shared with the threadpool that runs store calls.
        connect_args = kwargs.pop("connect_args", {})
        connect_args.setdefault("check_same_thread", False)
        kwargs["connect_args"] = connect_args
    return create_engine(database_url, pool_pre_ping=True, **kwargs)

def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def init_db(engine: Engine):
    """Create tables for every registered model."""
    # Import registers the models on Base.metadata
    import polyfaq.models  # noqa: F401
    Base.metadata.create_all(bind=engine)
