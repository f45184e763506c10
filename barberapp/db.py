# barberapp/db.py

from sqlmodel import SQLModel, create_engine

from barberapp.config import config


def make_engine(database_url: str = config.DATABASE_URL):
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # required for SQLite + FastAPI
    return create_engine(database_url, echo=False, connect_args=connect_args)


engine = make_engine()


def init_db(bind=None):
    SQLModel.metadata.create_all(bind or engine)
