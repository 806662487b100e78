"""
Base model with common fields and utilities
"""
import uuid

from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.ext.declarative import declared_attr

from adgen.core.database import Base


def new_uuid() -> str:
    """Primary key default: random UUID rendered as text"""
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin for created_at and updated_at timestamps"""

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False
    )


class BaseModel(Base, TimestampMixin):
    """Abstract base model with common functionality"""

    __abstract__ = True

    id = Column(String(36), primary_key=True, default=new_uuid)

    @declared_attr
    def __tablename__(cls) -> str:
        """Generate table name from class name"""
        # Convert CamelCase to snake_case
        name = cls.__name__
        return ''.join(
            ['_' + c.lower() if c.isupper() else c for c in name]
        ).lstrip('_')
