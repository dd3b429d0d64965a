# Imagens por categoria e vídeos (somente leitura)
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.schemas import image_schema
from app.services import image_service

router = APIRouter(
    prefix="/api",
    tags=["Media"],
)


@router.get("/house-images", response_model=List[image_schema.HouseImageOut])
def list_house_images(
    house_id: Optional[int] = Query(None, alias="houseId"),
    db: Session = Depends(get_db),
):
    return image_service.list_house_images(db, house_id=house_id)


@router.get("/room-images", response_model=List[image_schema.ImageOut])
def list_room_images(db: Session = Depends(get_db)):
    return image_service.list_room_images(db)


@router.get("/gallery-images", response_model=List[image_schema.ImageOut])
def list_gallery_images(db: Session = Depends(get_db)):
    return image_service.list_gallery_images(db)


@router.get("/floor-images", response_model=List[image_schema.ImageOut])
def list_floor_images(db: Session = Depends(get_db)):
    return image_service.list_floor_plan_images(db)


@router.get("/videos", response_model=List[image_schema.VideoOut])
def list_videos(db: Session = Depends(get_db)):
    return image_service.list_videos(db)
