# Dependências compartilhadas: sessão do banco e ciclo de vida da aplicação
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core import database
from app.core.config import settings
from app.services import user_service

logger = logging.getLogger(__name__)


# Lifespan handler para startup (garante o admin) e shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.ADMIN_EMAIL and settings.ADMIN_PASSWORD:
        db = database.SessionLocal()
        try:
            if not user_service.get_user_by_email(db, settings.ADMIN_EMAIL):
                user_service.create_user(db, settings.ADMIN_EMAIL, settings.ADMIN_PASSWORD)
                logger.info(f"Usuário admin '{settings.ADMIN_EMAIL}' criado com sucesso")
        except Exception as e:
            logger.error(f"Erro ao criar usuário admin: {e}", exc_info=True)
            raise
        finally:
            db.close()
    yield


def get_db():
    db = database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
