"""User model definitions."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func, true, false
from mentors_api.database import Base


class User(Base):
    """Represents a registered student."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    phone = Column(String)
    class_level = Column(String)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime, default=func.now(), server_default=func.now())
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    trial_used = Column(Boolean, nullable=False, default=False, server_default=false())
