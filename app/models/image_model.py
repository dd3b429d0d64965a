from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import TimestampMixin


class HouseImage(TimestampMixin, Base):
    __tablename__ = "houseimages"

    id       = Column(Integer, primary_key=True, index=True)
    src      = Column(String(500), nullable=False, index=True)
    house_id = Column(Integer, ForeignKey("houses.id", ondelete="SET NULL"), nullable=True, index=True)
    house    = relationship("House", back_populates="images")


# Carrosséis sem vínculo com uma unidade específica
class RoomImage(TimestampMixin, Base):
    __tablename__ = "roomimages"

    id  = Column(Integer, primary_key=True, index=True)
    src = Column(String(500), nullable=False, index=True)


class GalleryImage(TimestampMixin, Base):
    __tablename__ = "galleryimages"

    id  = Column(Integer, primary_key=True, index=True)
    src = Column(String(500), nullable=False, index=True)


class FloorPlanImage(TimestampMixin, Base):
    __tablename__ = "floorplanimages"

    id  = Column(Integer, primary_key=True, index=True)
    src = Column(String(500), nullable=False, index=True)
