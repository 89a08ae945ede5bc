import logging
from fastapi import BackgroundTasks

from error import NotificationError, PersistenceError
from schema.contact import ContactEntry, ContactIn, ContactOut
from service.contact_store import ContactStore
from service.email import Notifier

logger = logging.getLogger(__name__)


class ContactOp:

    @staticmethod
    async def submit_contact_form(contact_data: ContactIn,
                                  store: ContactStore,
                                  notifier: Notifier,
                                  background_tasks: BackgroundTasks) -> ContactOut:
        """
        Record a contact submission and notify the administrator.

        Storing and notifying are independent best-effort steps: a failure
        in either is logged and the caller is still told the message was
        received.
        """
        entry = ContactEntry.from_submission(contact_data)

        try:
            await store.append(entry)
        except PersistenceError as e:
            logger.error(f"Contact from {entry.name} was not stored: {e.msg}")

        background_tasks.add_task(ContactOp.notify_admin, notifier, entry)

        return ContactOut()

    @staticmethod
    async def notify_admin(notifier: Notifier, entry: ContactEntry) -> bool:
        """Send the notification, reporting failure through the log only"""
        try:
            await notifier.notify(entry)
        except NotificationError as e:
            logger.error(f"Contact notification for {entry.name} failed: {e.msg}")
            return False
        return True
