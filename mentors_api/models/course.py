"""Course model definitions."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func, true
from mentors_api.database import Base


class Course(Base):
    """Represents a course offered on the platform. Managed outside the API."""
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String)
    description = Column(Text)
    class_level = Column(String)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(DateTime, default=func.now(), server_default=func.now())
