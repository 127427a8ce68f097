# This project was developed with assistance from AI tools.
"""
Content Sources -- domain models

Repository configurations owned by an organization (tenant).
"""

from sqlalchemy import Column, DateTime, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import ARRAY

from .database import Base


class RepositoryConfiguration(Base):
    """A repository URL plus the distribution metadata it serves."""

    __tablename__ = "repository_configurations"
    __table_args__ = (
        UniqueConstraint("org_id", "name", name="uq_repository_configurations_org_name"),
        UniqueConstraint("org_id", "url", name="uq_repository_configurations_org_url"),
    )

    uuid = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False)
    url = Column(Text, nullable=False)
    distribution_versions = Column(ARRAY(String(255)), nullable=False, default=list)
    distribution_arch = Column(String(255), nullable=False, default="any")
    account_id = Column(String(255), nullable=True)
    org_id = Column(String(255), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<RepositoryConfiguration(uuid={self.uuid}, name='{self.name}', org_id={self.org_id})>"
