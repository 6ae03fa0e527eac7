"""
Database engine, session factory and the get_db dependency
"""
from sqlalchemy.orm import sessionmaker

from atams.db.session import create_engine_from_settings, get_db_factory

from app.core.config import settings

engine = create_engine_from_settings(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
get_db = get_db_factory(SessionLocal)
