from typing import List

from sqlalchemy.orm import Session

from app.models import house_model


def list_houses(db: Session) -> List[house_model.House]:
    return db.query(house_model.House).order_by(house_model.House.id).all()


def list_active_houses(db: Session) -> List[house_model.House]:
    return (
        db.query(house_model.House)
        .filter(house_model.House.state == house_model.HouseState.ACTIF.value)
        .order_by(house_model.House.id)
        .all()
    )


def set_house_state(db: Session, house_id: int, state: house_model.HouseState) -> int:
    """
    Atualiza o estado sem verificar se a casa existe.
    Retorna o número de linhas afetadas (0 para id inexistente).
    """
    value = state.value if isinstance(state, house_model.HouseState) else state
    updated = (
        db.query(house_model.House)
        .filter(house_model.House.id == house_id)
        .update({house_model.House.state: value}, synchronize_session="fetch")
    )
    db.commit()
    return updated
