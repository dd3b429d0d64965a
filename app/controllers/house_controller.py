from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.schemas import house_schema
from app.services import house_service

router = APIRouter(
    prefix="/api/houses",
    tags=["Houses"],
)


@router.get("", response_model=List[house_schema.HouseOut])
def list_houses(db: Session = Depends(get_db)):
    return house_service.list_houses(db)


@router.put("/{house_id}", response_model=house_schema.SuccessResponse)
def update_house_state(
    house_id: int,
    body: house_schema.HouseStateUpdate,
    db: Session = Depends(get_db),
):
    """
    Alterna a disponibilidade da unidade ("actif" / "inactif").
    Id inexistente não é erro: nenhuma linha é alterada.
    """
    house_service.set_house_state(db, house_id, body.state)
    return {"success": True}
