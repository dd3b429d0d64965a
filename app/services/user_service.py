from email_validator import EmailNotValidError, validate_email
from sqlalchemy.orm import Session
from passlib.context import CryptContext

from app.core import errors
from app.models import user_model

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def normalize_email(email: str) -> str:
    """
    Mesma forma que o EmailStr do login produz (domínio em minúsculas).
    Levanta EmailNotValidError para endereços inválidos.
    """
    return validate_email(email, check_deliverability=False).normalized


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_user_by_email(db: Session, email: str):
    try:
        email = normalize_email(email)
    except EmailNotValidError:
        # Endereço inválido nunca é gravado
        return None
    return db.query(user_model.User).filter(user_model.User.email == email).first()


def create_user(db: Session, email: str, password: str) -> user_model.User:
    db_user = user_model.User(
        email=normalize_email(email),
        hashed_password=pwd_context.hash(password),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def ensure_user(db: Session, email: str, password: str) -> user_model.User:
    """Remove qualquer registro anterior do email e recria (idempotente)."""
    email = normalize_email(email)
    db.query(user_model.User).filter(user_model.User.email == email).delete()
    db.commit()
    return create_user(db, email, password)


def authenticate(db: Session, email: str, password: str) -> user_model.User:
    user = get_user_by_email(db, email)
    if not user:
        raise errors.NotFoundError("Email not found")
    if not verify_password(password, user.hashed_password):
        raise errors.AuthError("Wrong password")
    return user
