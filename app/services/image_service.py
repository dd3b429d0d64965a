"""
Catálogo de mídia: imagens por categoria e vídeos da página inicial
"""
from typing import List, Optional

from sqlalchemy.orm import Session

from app.models import image_model, video_model


def list_house_images(db: Session, house_id: Optional[int] = None) -> List[image_model.HouseImage]:
    query = db.query(image_model.HouseImage)
    if house_id is not None:
        query = query.filter(image_model.HouseImage.house_id == house_id)
    return query.order_by(image_model.HouseImage.id).all()


def list_room_images(db: Session) -> List[image_model.RoomImage]:
    return db.query(image_model.RoomImage).order_by(image_model.RoomImage.id).all()


def list_gallery_images(db: Session) -> List[image_model.GalleryImage]:
    return db.query(image_model.GalleryImage).order_by(image_model.GalleryImage.id).all()


def list_floor_plan_images(db: Session) -> List[image_model.FloorPlanImage]:
    return db.query(image_model.FloorPlanImage).order_by(image_model.FloorPlanImage.id).all()


def list_videos(db: Session) -> List[video_model.Video]:
    return db.query(video_model.Video).order_by(video_model.Video.id).all()
