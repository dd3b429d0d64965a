from sqlalchemy import Column, Integer, String

from app.core.database import Base
from app.models.mixins import TimestampMixin


class Video(TimestampMixin, Base):
    __tablename__ = "videos"

    id    = Column(Integer, primary_key=True, index=True)
    src   = Column(String(500), nullable=False, index=True)
    title = Column(String(255), nullable=False, default="Video")
