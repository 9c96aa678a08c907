"""
Messages API — Health, Config and Logging Tests
================================================

What:  /health status reporting, settings validation, access log levels.
"""

import logging

import pytest
from pydantic import ValidationError as PydanticValidationError

from messages_api import __version__
from messages_api.config import Settings
from messages_api.middleware.logging import level_for_status


class TestHealth:
    """GET /health"""

    @pytest.mark.asyncio
    async def test_healthy_before_first_write(self, test_client, store_path):
        store_path.parent.mkdir(parents=True)

        response = await test_client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["storage"] == "available"
        assert body["version"] == __version__
        assert body["uptime_seconds"] >= 0

    @pytest.mark.asyncio
    async def test_healthy_when_store_directory_missing(self, test_client, store_path):
        assert not store_path.parent.exists()

        response = await test_client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

        created = await test_client.post("/messages", json={"content": "first"})
        assert created.status_code == 201

    @pytest.mark.asyncio
    async def test_healthy_with_messages(self, test_client):
        await test_client.post("/messages", json={"content": "hi"})

        response = await test_client.get("/health")
        assert response.json()["status"] == "healthy"

    @pytest.mark.asyncio
    async def test_corrupt_store_is_unhealthy(self, test_client, store_path):
        store_path.parent.mkdir(parents=True)
        store_path.write_text("[]", encoding="utf-8")

        response = await test_client.get("/health")

        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "unhealthy"
        assert body["storage"] == "unavailable"


class TestSettings:
    """Settings validation."""

    def test_log_level_is_normalized(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(PydanticValidationError):
            Settings(log_level="chatty")

    def test_id_upper_bound_range(self):
        with pytest.raises(PydanticValidationError):
            Settings(message_id_upper_bound=1)

    def test_cors_origins_list(self):
        settings = Settings(cors_origins="http://a.test, http://b.test")
        assert settings.cors_origins_list == ["http://a.test", "http://b.test"]

    def test_messages_path_is_absolute(self):
        assert Settings(messages_file="data/messages.json").messages_path.is_absolute()


class TestAccessLogLevel:
    """Access log level follows the status class."""

    @pytest.mark.parametrize(
        "status, level",
        [(200, logging.INFO), (201, logging.INFO), (304, logging.INFO),
         (400, logging.WARNING), (404, logging.WARNING), (500, logging.ERROR)],
    )
    def test_level_for_status(self, status, level):
        assert level_for_status(status) == level
