from datetime import datetime, timezone
from typing import List

import pytest
from fastapi.testclient import TestClient

from config.setting import Settings
from core.setup import ServiceSetup
from error import NotificationError, PersistenceError
from main import create_app
from schema.contact import ContactEntry
from service.contact_store import ContactStore
from service.email import Notifier


class MemoryContactStore(ContactStore):
    """In-memory contact log; ``fail`` makes every append raise"""

    def __init__(self, fail=False):
        self.entries: List[ContactEntry] = []
        self.fail = fail

    async def append(self, entry):
        if self.fail:
            raise PersistenceError("disk full")
        self.entries.append(entry)

    async def read_all(self):
        return list(self.entries)


class RecordingNotifier(Notifier):

    def __init__(self, fail=False):
        self.sent: List[ContactEntry] = []
        self.fail = fail

    async def notify(self, entry):
        if self.fail:
            raise NotificationError("relay down")
        self.sent.append(entry)


def make_entry(name="Amina", email="amina@example.com", message="Need a quote"):
    return ContactEntry(
        name=name,
        email=email,
        message=message,
        received_at=datetime.now(timezone.utc),
    )


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        CONTACTS_FILE=str(tmp_path / "contacts.json"),
        UPLOAD_DIR=str(tmp_path / "uploads"),
        PUBLIC_DIR=str(tmp_path / "public"),
        SMTP_HOST="",
        SMTP_USER="",
        SMTP_PASS="",
    )


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def services(settings, notifier):
    return ServiceSetup(settings, notifier=notifier)


@pytest.fixture
def app(settings, services):
    return create_app(settings, services)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
