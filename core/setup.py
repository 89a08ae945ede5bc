from fastapi import Request

from config.setting import Settings
from service.contact_store import ContactStore, JsonFileContactStore
from service.email import Notifier, build_notifier
from service.files.storage import UploadStorage


class ServiceSetup:
    """Owns the services shared by every request.

    Built once per application; the notifier choice is fixed here and never
    re-evaluated per request.
    """

    def __init__(self, settings: Settings, contact_store: ContactStore = None,
                 upload_storage: UploadStorage = None, notifier: Notifier = None):
        self.settings = settings
        self.contact_store = contact_store or JsonFileContactStore(settings.CONTACTS_FILE)
        self.upload_storage = upload_storage or UploadStorage(
            settings.UPLOAD_DIR, settings.UPLOAD_URL_PREFIX
        )
        self.notifier = notifier or build_notifier(settings)

    def startup(self) -> None:
        """Prepare filesystem state; raising here stops the server"""
        self.upload_storage.ensure_dir()


def get_services(request: Request) -> ServiceSetup:
    return request.app.state.services


def get_contact_store(request: Request) -> ContactStore:
    return get_services(request).contact_store


def get_upload_storage(request: Request) -> UploadStorage:
    return get_services(request).upload_storage


def get_notifier(request: Request) -> Notifier:
    return get_services(request).notifier


def get_settings(request: Request) -> Settings:
    return get_services(request).settings
