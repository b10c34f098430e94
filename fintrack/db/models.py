"""
SQLAlchemy ORM models.
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON, Text
from sqlalchemy.orm import declarative_base
import uuid

Base = declarative_base()


def generate_uuid():
    return str(uuid.uuid4())


class AuditMixin:
    """Mixin for audit fields on all models."""

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )


class Scenario(AuditMixin, Base):
    """A named set of calculator inputs and the results they produced."""

    __tablename__ = "scenarios"

    id = Column(String, primary_key=True, default=generate_uuid)
    name = Column(String(255), unique=True, nullable=False, index=True)
    kind = Column(String(50), nullable=False, index=True)
    description = Column(Text)

    # Calculator inputs, validated against the kind's request schema
    inputs = Column(JSON, default=dict, nullable=False)

    # Calculated results (cached)
    results = Column(JSON, default=dict)
