from typing import List, Optional

from pydantic import BaseModel, Field

from app.schemas.house_schema import HouseOut


class ChatRequest(BaseModel):
    # Opcionais aqui para que a ausência vire 400 no controller, não 422
    message: Optional[str] = None
    session_id: Optional[str] = Field(None, alias="sessionId")

    class Config:
        populate_by_name = True


class ChatResponse(BaseModel):
    response: str
    suggested_houses: List[HouseOut] = Field(default_factory=list, alias="suggestedHouses")

    class Config:
        populate_by_name = True
