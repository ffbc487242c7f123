# teamdesk/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from teamdesk import config

Base = declarative_base()


def configure_sqlite(engine):
    """
    pysqlite opens transactions lazily and ignores foreign keys by default.
    Take over BEGIN ourselves so SAVEPOINTs behave, and turn FK enforcement on
    so ON DELETE CASCADE / SET NULL work like they do on MySQL.
    """

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")

    return engine


def make_engine(url: str = config.DATABASE_URL, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
        return configure_sqlite(create_engine(url, echo=config.SQL_ECHO, **kwargs))
    return create_engine(url, echo=config.SQL_ECHO, pool_pre_ping=True, **kwargs)


engine = make_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
