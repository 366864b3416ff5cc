from app.database.base import Base
from app.database.engine import engine, init_db
from app.database.session import SessionLocal, get_db

__all__ = ["Base", "SessionLocal", "engine", "get_db", "init_db"]
