"""
User Model - Identity rows owned by the credential store
"""
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func

from atams.db import Base


class User(Base):
    """Users table - only the fields attendance and leave listings join on"""
    __tablename__ = "users"

    u_id = Column(String(50), primary_key=True, index=True)
    u_role = Column(String(20), nullable=False)  # 'Employee' or 'HR'
    u_name = Column(String(100), nullable=True)
    u_created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
