import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.dependencies import get_db
from app.core.rate_limit import limit
from app.schemas import user_schema
from app.services import user_service

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/auth",
    tags=["Auth"],
)


@router.post("/login", response_model=user_schema.LoginResponse)
@limit()
def login(
    request: Request,
    credentials: user_schema.LoginRequest,
    db: Session = Depends(get_db),
):
    """
    Login do painel administrativo.
    404 se o email não existe, 401 se a senha não confere.
    """
    user = user_service.authenticate(db, credentials.email, credentials.password)
    logger.info(f"Login de {user.email}")
    return {"success": True, "message": "Login successful", "email": user.email}
