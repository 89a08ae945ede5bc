from fastapi import APIRouter, BackgroundTasks, Depends
from controller.contact import ContactOp
from core.setup import get_contact_store, get_notifier
from schema.common import ErrorsOut
from schema.contact import ContactIn, ContactOut
from service.contact_store import ContactStore
from service.email import Notifier

router = APIRouter(tags=["contact"])


@router.post(
    "/contact",
    response_model=ContactOut,
    responses={422: {"model": ErrorsOut}},
)
async def submit_contact_form(
    contact_data: ContactIn,
    background_tasks: BackgroundTasks,
    store: ContactStore = Depends(get_contact_store),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Submit the site contact form
    - Appends the message to the contact log
    - Emails the administrator when SMTP is configured
    """
    return await ContactOp.submit_contact_form(contact_data, store, notifier, background_tasks)
