import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.controllers import (
    auth_controller,
    chat_controller,
    comment_controller,
    health_controller,
    house_controller,
    media_controller,
)
from app.core.config import settings
from app.core.database import Base, engine
from app.core.dependencies import lifespan
from app.core.errors import register_exception_handlers
from app.core.rate_limit import limiter
from app import models  # noqa: F401  registra as tabelas

logging.basicConfig(level=logging.INFO if settings.ENVIRONMENT == "production" else logging.DEBUG)

# Cria tabelas no banco
Base.metadata.create_all(bind=engine)

# Cria a aplicação FastAPI com lifespan
app = FastAPI(title="Ambassadeur Prestige API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
register_exception_handlers(app)


# --- Endpoints ---
app.include_router(house_controller.router)
app.include_router(media_controller.router)
app.include_router(comment_controller.router)
app.include_router(auth_controller.router)
app.include_router(chat_controller.router)
app.include_router(health_controller.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
