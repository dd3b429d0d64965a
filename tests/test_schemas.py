"""
Testes para schemas e validações
"""
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.models.house_model import House, HouseState
from app.schemas import chat_schema, comment_schema, house_schema, user_schema


class TestHouseSchemas:
    """Testes para schemas de casa"""

    def test_state_update_accepts_known_values(self):
        assert house_schema.HouseStateUpdate(state="actif").state is HouseState.ACTIF
        assert house_schema.HouseStateUpdate(state="inactif").state is HouseState.INACTIF

    def test_state_update_rejects_other_values(self):
        with pytest.raises(ValidationError):
            house_schema.HouseStateUpdate(state="vendu")

    def test_house_out_serializes_camel_case(self):
        house = House(id=1, number="3R", state="actif", type="villa")
        data = house_schema.HouseOut.model_validate(house).model_dump(by_alias=True)
        assert data["number"] == "3R"
        assert "createdAt" in data
        assert "created_at" not in data

    def test_house_out_keeps_legacy_state(self):
        """Valores fora do enum continuam legíveis na saída"""
        house = House(id=2, number="4", state="vendu", type="duplex")
        assert house_schema.HouseOut.model_validate(house).state == "vendu"
        assert house.is_active is False

    def test_house_out_timestamps_are_utc(self):
        """Timestamps lidos sem fuso saem com Z"""
        house = House(
            id=1, number="3R", state="actif", type="villa",
            created_at=datetime(2025, 1, 2, 3, 4, 5),
            updated_at=datetime(2025, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2))),
        )
        data = house_schema.HouseOut.model_validate(house).model_dump(mode="json", by_alias=True)
        assert data["createdAt"] == "2025-01-02T03:04:05Z"
        assert data["updatedAt"] == "2025-01-02T03:04:05Z"


class TestCommentSchemas:
    """Testes para schemas de pedido"""

    def test_comment_create_valid(self):
        comment = comment_schema.CommentCreate(
            houseId=1,
            name="Jean",
            phone="0600000000",
            request="call",
            text="Bonjour",
            date="2025-11-20T10:30:00Z",
        )
        assert comment.house_id == 1
        assert comment.seen is None
        assert comment.date.year == 2025

    @pytest.mark.parametrize("missing", ["houseId", "name", "phone", "request", "text", "date"])
    def test_comment_create_missing_required(self, missing):
        data = {
            "houseId": 1,
            "name": "Jean",
            "phone": "0600000000",
            "request": "call",
            "text": "Bonjour",
            "date": "2025-11-20T10:30:00Z",
        }
        del data[missing]
        with pytest.raises(ValidationError):
            comment_schema.CommentCreate(**data)

    def test_comment_create_blank_name(self):
        with pytest.raises(ValidationError):
            comment_schema.CommentCreate(
                houseId=1, name="", phone="06", request="call", text="x", date="2025-11-20T10:30:00Z"
            )

    def test_comment_date_normalized_to_utc(self):
        comment = comment_schema.CommentCreate(
            houseId=1, name="Jean", phone="06", request="call", text="x",
            date="2025-11-20T10:30:00+02:00",
        )
        assert comment.date == datetime(2025, 11, 20, 8, 30, tzinfo=timezone.utc)
        assert comment.date.utcoffset() == timedelta(0)

    def test_comment_naive_date_is_utc(self):
        comment = comment_schema.CommentCreate(
            houseId=1, name="Jean", phone="06", request="call", text="x",
            date="2025-11-20T10:30:00",
        )
        assert '"date":"2025-11-20T10:30:00Z"' in comment.model_dump_json(by_alias=True)


class TestUserSchemas:

    def test_login_request_invalid_email(self):
        with pytest.raises(ValidationError):
            user_schema.LoginRequest(email="not-an-email", password="x")

    def test_login_response_has_no_password(self):
        assert "password" not in user_schema.LoginResponse.model_fields


class TestChatSchemas:

    def test_chat_request_alias(self):
        body = chat_schema.ChatRequest(**{"message": "hi", "sessionId": "abc"})
        assert body.session_id == "abc"

    def test_chat_request_fields_optional(self):
        body = chat_schema.ChatRequest()
        assert body.message is None
        assert body.session_id is None

    def test_chat_response_alias(self):
        data = chat_schema.ChatResponse(response="ok").model_dump(by_alias=True)
        assert data == {"response": "ok", "suggestedHouses": []}
