"""
User entity.
"""

from datetime import datetime

from pydantic import Field

from botcatalog.core.modeling import Entity, action, violation
from botcatalog.core.validation import required_text, uuid_text

from .email import Email

UserId = uuid_text("User id must be a UUID")
FirstName = required_text("First name is required")
LastName = required_text("Last name is required")


class User(Entity):
    id: UserId
    email: Email
    first_name: FirstName
    last_name: LastName
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @action
    def update_email(self, new_email: Email) -> None:
        self.email = new_email

    @action
    def update_name(self, first_name: str, last_name: str) -> None:
        if len(first_name) < 1:
            raise violation("First name cannot be empty")
        if len(last_name) < 1:
            raise violation("Last name cannot be empty")
        self.first_name = first_name
        self.last_name = last_name
