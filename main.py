import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from address_book import AddressBook, Person
from config import Settings, settings as default_settings
from logging_config import setup_logging
from schemas import ContactIn, ContactOut

logger = logging.getLogger(__name__)


class ContactNotFound(Exception):
    def __init__(self, person_id: int):
        super().__init__(f"Contact {person_id} not found")
        self.person_id = person_id


def get_address_book(request: Request) -> AddressBook:
    return request.app.state.address_book


def get_base_url(request: Request) -> str:
    """Origin used to build hrefs: the configured public URL if any."""
    return request.app.state.settings.public_url or str(request.base_url)


router = APIRouter(prefix="/contacts", tags=["contacts"])


@router.get("", response_model=List[ContactOut])
def list_contacts(
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    return [ContactOut.from_person(person, base_url) for person in book.list()]


@router.post("", response_model=ContactOut, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact: ContactIn,
    response: Response,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    # Client-supplied id and href are ignored.
    person = Person(id=book.next_id(), name=contact.name)
    book.add(person)
    created = ContactOut.from_person(person, base_url)
    response.headers["Location"] = created.href
    return created


@router.get("/person/{person_id}", response_model=ContactOut)
def read_contact(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
    base_url: str = Depends(get_base_url),
):
    person = book.get(person_id)
    if person is None:
        raise ContactNotFound(person_id)
    return ContactOut.from_person(person, base_url)


@router.put(
    "/person/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def update_contact(
    person_id: int,
    contact: ContactIn,
    book: AddressBook = Depends(get_address_book),
):
    # Only existing entries can be updated; PUT never creates.
    if not book.replace(person_id, contact.name):
        raise ContactNotFound(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/person/{person_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_contact(
    person_id: int,
    book: AddressBook = Depends(get_address_book),
):
    # A second delete of the same id reports 404; the end state is the same.
    if not book.remove(person_id):
        raise ContactNotFound(person_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def contact_not_found_handler(request: Request, exc: ContactNotFound) -> Response:
    logger.debug("%s %s: %s", request.method, request.url.path, exc)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def malformed_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: malformed request", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(
    address_book: Optional[AddressBook] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.address_book = address_book if address_book is not None else AddressBook()
    app.state.settings = settings

    app.add_exception_handler(ContactNotFound, contact_not_found_handler)
    app.add_exception_handler(RequestValidationError, malformed_request_handler)
    app.include_router(router)

    @app.get("/health", tags=["health"])
    def health_check():
        return {
            "status": "healthy",
            "service": settings.project_name,
            "version": settings.api_version,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        log_level=default_settings.log_level.lower(),
    )
