from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.fields import UTCDateTime


class ImageOut(BaseModel):
    id: int
    src: str
    created_at: Optional[UTCDateTime] = Field(None, alias="createdAt")
    updated_at: Optional[UTCDateTime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class HouseImageOut(ImageOut):
    house_id: Optional[int] = Field(None, alias="houseId")


class VideoOut(BaseModel):
    id: int
    src: str
    title: str

    class Config:
        from_attributes = True
