"""
Carga inicial do banco

    python -m app.seed

Idempotente: cada registro é apagado pela sua chave natural (número da
casa, src da imagem/vídeo, email) antes de ser reinserido.
"""
import logging
from typing import Dict, List, Sequence

from sqlalchemy.orm import Session

from app.core import database
from app.core.config import settings
from app.models import house_model, image_model, video_model
from app.services import user_service

logger = logging.getLogger(__name__)

VIDEOS: List[Dict[str, str]] = [
    {"src": "/videos/ambassadeur-aerial.mp4", "title": "Vue aérienne"},
    {"src": "/videos/ambassadeur-facade.mp4", "title": "Façade"},
    {"src": "/videos/ambassadeur-interior.mp4", "title": "Intérieur"},
]

HOUSES: List[Dict[str, str]] = [
    {"number": "1", "state": "actif", "type": "villa"},
    {"number": "2", "state": "actif", "type": "villa"},
    {"number": "3", "state": "inactif", "type": "duplex"},
    {"number": "4", "state": "actif", "type": "duplex"},
    {"number": "5", "state": "actif", "type": "triplex"},
    {"number": "6", "state": "inactif", "type": "triplex"},
]

# Uma imagem por casa, na mesma ordem de HOUSES
HOUSE_IMAGES: List[str] = [f"/images/houses/house-{h['number']}.jpg" for h in HOUSES]

ROOM_IMAGES: List[str] = [
    "/images/rooms/living-room.jpg",
    "/images/rooms/kitchen.jpg",
    "/images/rooms/master-bedroom.jpg",
    "/images/rooms/bathroom.jpg",
]

GALLERY_IMAGES: List[str] = [
    "/images/gallery/entrance.jpg",
    "/images/gallery/garden.jpg",
    "/images/gallery/pool.jpg",
    "/images/gallery/night.jpg",
]

FLOOR_PLAN_IMAGES: List[str] = [
    "/images/plans/villa-ground.png",
    "/images/plans/villa-first.png",
    "/images/plans/duplex.png",
    "/images/plans/triplex.png",
]


def seed_videos(db: Session, videos: Sequence[Dict[str, str]] = VIDEOS) -> int:
    srcs = [v["src"] for v in videos]
    db.query(video_model.Video).filter(video_model.Video.src.in_(srcs)).delete(synchronize_session=False)
    db.add_all(video_model.Video(src=v["src"], title=v.get("title") or "Video") for v in videos)
    db.commit()
    return len(videos)


def seed_houses(db: Session, houses: Sequence[Dict[str, str]] = HOUSES) -> List[house_model.House]:
    numbers = [h["number"] for h in houses]
    # Pedidos das casas removidas caem junto (ON DELETE CASCADE)
    db.query(house_model.House).filter(house_model.House.number.in_(numbers)).delete(synchronize_session=False)
    rows = [house_model.House(number=h["number"], state=h["state"], type=h["type"]) for h in houses]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    return rows


def seed_house_images(
    db: Session,
    houses: Sequence[house_model.House],
    srcs: Sequence[str] = HOUSE_IMAGES,
) -> int:
    db.query(image_model.HouseImage).filter(image_model.HouseImage.src.in_(srcs)).delete(synchronize_session=False)
    data = [
        image_model.HouseImage(src=src, house_id=house.id)
        for src, house in zip(srcs, sorted(houses, key=lambda h: h.id))
    ]
    db.add_all(data)
    db.commit()
    return len(data)


def seed_images(db: Session, model, srcs: Sequence[str]) -> int:
    """Carrosséis sem vínculo com casa (quartos, galeria, plantas)."""
    db.query(model).filter(model.src.in_(srcs)).delete(synchronize_session=False)
    db.add_all(model(src=src) for src in srcs)
    db.commit()
    return len(srcs)


def seed_admin(db: Session) -> bool:
    if not (settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD):
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD não definidos; admin não criado")
        return False
    user_service.ensure_user(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
    return True


def run(db: Session) -> Dict[str, int]:
    summary = {"videos": seed_videos(db)}
    houses = seed_houses(db)
    summary["houses"] = len(houses)
    summary["house_images"] = seed_house_images(db, houses)
    summary["room_images"] = seed_images(db, image_model.RoomImage, ROOM_IMAGES)
    summary["gallery_images"] = seed_images(db, image_model.GalleryImage, GALLERY_IMAGES)
    summary["floor_plan_images"] = seed_images(db, image_model.FloorPlanImage, FLOOR_PLAN_IMAGES)
    summary["admin"] = int(seed_admin(db))
    return summary


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    from app import models  # noqa: F401

    database.Base.metadata.create_all(bind=database.engine)
    db = database.SessionLocal()
    try:
        summary = run(db)
        logger.info(f"Seed concluído: {summary}")
    finally:
        db.close()


if __name__ == "__main__":
    main()
