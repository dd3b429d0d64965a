import enum

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.core.database import Base
from app.models.mixins import TimestampMixin


class HouseState(str, enum.Enum):
    ACTIF   = "actif"
    INACTIF = "inactif"


class House(TimestampMixin, Base):
    __tablename__ = "houses"

    id     = Column(Integer, primary_key=True, index=True)
    number = Column(String(50), nullable=False, index=True)
    # String livre no banco; qualquer valor diferente de "actif" conta como indisponível
    state  = Column(String(20), nullable=False, default=HouseState.INACTIF.value, index=True)
    type   = Column(String(100), nullable=False)

    # ON DELETE fica a cargo do banco: comentários somem, imagens ficam sem casa
    comments = relationship("Comment", back_populates="house", cascade="all, delete-orphan", passive_deletes=True)
    images   = relationship("HouseImage", back_populates="house", passive_deletes=True)

    @property
    def is_active(self) -> bool:
        return self.state == HouseState.ACTIF.value

    def __repr__(self):
        return f"<House(id={self.id}, number='{self.number}', state='{self.state}')>"
