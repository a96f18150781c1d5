"""Platform-wide key/value configuration model."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String

from app.persistence.database import Base, JSONType


class PlatformConfig(Base):
    """Platform-wide settings stored as JSON values under a string key."""

    __tablename__ = "platform_config"

    key = Column(String(100), primary_key=True)
    value = Column(JSONType, nullable=False)
    updated_at = Column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<PlatformConfig(key={self.key})>"
