"""
Shared fixtures: a fixed clock, in-memory storage, an application container and
an HTTP client bound to it.
"""

import io
from datetime import date
from typing import Callable, Optional

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from my_garden.container import AppContainer
from my_garden.main import create_application
from my_garden.modules.plant_management.infrastructure.external.local_notifier import LocalReminderNotifier
from my_garden.shared.config.settings import Settings
from my_garden.shared.core.exceptions import StorageError
from my_garden.shared.infrastructure.storage.memory_storage import InMemoryStorage

TODAY = date(2024, 1, 1)


class FlakyStorage(InMemoryStorage):
    """In-memory storage whose writes can be switched off."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fail_writes = False

    async def set(self, key: str, value: bytes) -> None:
        if self.fail_writes:
            raise StorageError("Disk full", backend=self.backend_name, key=key, operation="set")
        await super().set(key, value)


def make_image(fmt: str = "PNG", size=(8, 6), mode: str = "RGBA", color=(40, 160, 60, 255)) -> bytes:
    buffer = io.BytesIO()
    if mode in ("RGB", "L"):
        color = color[:3] if mode == "RGB" else 128
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_huge_png(size=(14000, 14000)) -> bytes:
    """A tiny 1-bit PNG whose pixel area is past Pillow's decompression bomb limit."""
    buffer = io.BytesIO()
    Image.new("1", size).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def png_bytes() -> bytes:
    return make_image("PNG")


@pytest.fixture
def jpeg_bytes() -> bytes:
    return make_image("JPEG", mode="RGB")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        LOG_FORMAT="text",
        LOG_LEVEL="DEBUG",
        STORAGE_BACKEND="memory",
        FIRST_WEEKDAY=6,
    )


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def notifier() -> LocalReminderNotifier:
    return LocalReminderNotifier(permission_granted=True)


@pytest.fixture
def container_factory(settings, storage, notifier) -> Callable[..., AppContainer]:
    def factory(
        today_value: date = TODAY,
        notifier_override: Optional[LocalReminderNotifier] = None,
    ) -> AppContainer:
        return AppContainer(
            settings,
            storage=storage,
            notifier=notifier_override or notifier,
            today=lambda: today_value,
        )

    return factory


@pytest.fixture
async def container(container_factory) -> AppContainer:
    app_container = container_factory()
    await app_container.startup()
    return app_container


@pytest.fixture
def client(settings, container_factory):
    app = create_application(settings=settings, container=container_factory())
    with TestClient(app) as test_client:
        yield test_client
