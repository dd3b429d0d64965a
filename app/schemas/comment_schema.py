from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.fields import UTCDateTime


class CommentBase(BaseModel):
    house_id: int = Field(..., alias="houseId")
    name: str     = Field(..., min_length=1)
    phone: str    = Field(..., min_length=1)
    request: str  = Field(..., min_length=1)
    text: str     = Field(..., min_length=1)
    # Data informada pelo cliente; o instante é mantido, gravado em UTC
    date: UTCDateTime

    class Config:
        populate_by_name = True


class CommentCreate(CommentBase):
    # Aceito por compatibilidade com o formulário, mas ignorado: todo pedido nasce não lido
    seen: Optional[bool] = None


class CommentOut(CommentBase):
    id: int
    seen: bool
    created_at: Optional[UTCDateTime] = Field(None, alias="createdAt")
    updated_at: Optional[UTCDateTime] = Field(None, alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class CommentCreated(BaseModel):
    success: bool = True
    data: CommentOut
