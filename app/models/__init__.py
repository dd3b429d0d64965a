# Importa todos os modelos para registrar as tabelas no Base.metadata
from app.models import comment_model, house_model, image_model, user_model, video_model  # noqa: F401
