from typing import Optional

from pydantic import BaseModel, Field

from app.models.house_model import HouseState
from app.schemas.fields import UTCDateTime


class HouseOut(BaseModel):
    id: int
    number: str
    # Saída aceita valores legados; só a entrada é restrita ao enum
    state: str
    type: str
    created_at: Optional[UTCDateTime] = Field(None, alias="createdAt")
    updated_at: Optional[UTCDateTime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class HouseStateUpdate(BaseModel):
    state: HouseState


class SuccessResponse(BaseModel):
    success: bool = True
