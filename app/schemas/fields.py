from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator


def as_utc(value: datetime) -> datetime:
    """
    Converte para UTC com fuso explícito.

    Datas sem fuso (como o SQLite e o MySQL devolvem) já estão em UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# Serializado como "2025-11-20T08:30:00Z"
UTCDateTime = Annotated[datetime, AfterValidator(as_utc)]
