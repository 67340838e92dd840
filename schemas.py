"""Request and response bodies for contacts; server assigns id and href."""

from typing import Optional

from pydantic import BaseModel, Field

from address_book import Person


class ContactIn(BaseModel):
    name: str = Field(..., description="Display name of the contact")
    id: Optional[int] = Field(None, description="Ignored; ids are assigned by the server")
    href: Optional[str] = Field(None, description="Ignored; derived from the id")


class ContactOut(BaseModel):
    id: int
    name: str
    href: str

    @classmethod
    def from_person(cls, person: Person, base_url: str) -> "ContactOut":
        return cls(id=person.id, name=person.name, href=person.href(base_url))
