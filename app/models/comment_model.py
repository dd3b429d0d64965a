from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import TimestampMixin


class Comment(TimestampMixin, Base):
    __tablename__ = "comments"

    id       = Column(Integer, primary_key=True, index=True)
    house_id = Column(Integer, ForeignKey("houses.id", ondelete="CASCADE"), nullable=False, index=True)
    name     = Column(String(255), nullable=False)
    phone    = Column(String(50), nullable=False)
    request  = Column(String(100), nullable=False)
    text     = Column(Text, nullable=False)
    date     = Column(DateTime(timezone=True), nullable=False)
    seen     = Column(Boolean, default=False, nullable=False, index=True)
    house    = relationship("House", back_populates="comments")
