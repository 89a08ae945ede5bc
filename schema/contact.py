from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError
from email_validator import EmailNotValidError, validate_email
from datetime import datetime, timezone

MESSAGE_MIN_LENGTH = 5


class ContactIn(BaseModel):
    """Contact form payload

    Values are checked with surrounding whitespace ignored but kept exactly as
    submitted, so the contact log stores what the visitor typed.
    """

    name: str
    email: str
    message: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise PydanticCustomError("string_too_short", "Name must not be empty")
        return value

    @field_validator("email")
    @classmethod
    def email_is_address(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise PydanticCustomError(
                "value_error",
                "value is not a valid email address: {reason}",
                {"reason": str(e)},
            )
        return value

    @field_validator("message")
    @classmethod
    def message_long_enough(cls, value: str) -> str:
        if len(value.strip()) < MESSAGE_MIN_LENGTH:
            raise PydanticCustomError(
                "string_too_short",
                "String should have at least {min_length} characters",
                {"min_length": MESSAGE_MIN_LENGTH},
            )
        return value


class ContactEntry(BaseModel):
    """A stored contact submission, persisted with its received time as ``date``"""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    email: str
    message: str
    received_at: datetime = Field(alias="date")

    @classmethod
    def from_submission(cls, contact: ContactIn) -> "ContactEntry":
        return cls(
            name=contact.name,
            email=contact.email,
            message=contact.message,
            received_at=datetime.now(timezone.utc),
        )

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class ContactOut(BaseModel):
    ok: bool = True
    message: str = "Received"
