"""
FastAPI backend: REST API over the in-memory contact book.
Run with uvicorn: uvicorn api.main:app --reload, or python -m api (reads PORT).
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from contactbook.application import ContactChanges, ContactService, NewContact
from contactbook.domain import Contact, ContactError
from contactbook.infrastructure import InMemoryContactRepository


def _log_level(raw: str | None) -> int:
    """Map a LOG_LEVEL name to its numeric level. Unknown or empty names fall back to INFO."""
    level = logging.getLevelName((raw or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=_log_level(os.environ.get("LOG_LEVEL")),
)
logger = logging.getLogger(__name__)

LIST_OK = "Contatos buscados com sucesso!"
CREATE_OK = "Contato cadastrado com sucesso!"
UPDATE_OK = "Contato atualizado com sucesso!"
DELETE_OK = "Contato deletado com sucesso!"


# --- Schemas ---


class ContactBody(BaseModel):
    """POST and PUT body. The body itself and both fields are optional; the service decides what is required."""

    name: str | None = None
    phone: str | None = None


class ContactItem(BaseModel):
    id: str
    name: str
    phone: str


class ResponseAPI(BaseModel):
    """Envelope shared by every /contacts response."""

    success: bool
    message: str
    data: Any = None


def _item(contact: Contact) -> dict[str, str]:
    return ContactItem(**contact.to_dict()).model_dump()


def _respond(message: str, data: Any, status_code: int = 200) -> JSONResponse:
    body = ResponseAPI(success=True, message=message, data=data)
    return JSONResponse(content=body.model_dump(mode="json"), status_code=status_code)


def get_service(request: Request) -> ContactService:
    return request.app.state.service


# --- App ---


def create_app(service: ContactService | None = None) -> FastAPI:
    """Build the app around one ContactService. A fresh in-memory registry is used when none is given."""
    if service is None:
        service = ContactService(InMemoryContactRepository())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Contact book API ready: GET/POST /contacts, PUT/DELETE /contacts/{id}")
        yield

    app = FastAPI(title="Contact Book API", lifespan=lifespan)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ContactError)
    async def contact_error_handler(request: Request, exc: ContactError) -> JSONResponse:
        logger.info(
            "Rejected %s %s: %s (%s)",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc.message,
        )
        body = ResponseAPI(success=False, message=exc.message, data=None)
        return JSONResponse(content=body.model_dump(), status_code=400)

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- REST: contacts ---

    @app.get("/contacts")
    def list_contacts(request: Request):
        contacts = get_service(request).list_contacts()
        return _respond(LIST_OK, [_item(c) for c in contacts])

    @app.post("/contacts")
    def create_contact(request: Request, body: ContactBody | None = None):
        if body is None:
            body = ContactBody()
        contact = get_service(request).create_contact(
            NewContact(name=body.name, phone=body.phone)
        )
        return _respond(CREATE_OK, _item(contact), status_code=201)

    @app.put("/contacts/{contact_id}")
    def update_contact(contact_id: str, request: Request, body: ContactBody | None = None):
        if body is None:
            body = ContactBody()
        contact = get_service(request).update_contact(
            contact_id, ContactChanges(name=body.name, phone=body.phone)
        )
        return _respond(UPDATE_OK, _item(contact), status_code=201)

    @app.delete("/contacts/{contact_id}")
    def delete_contact(contact_id: str, request: Request):
        remaining = get_service(request).delete_contact(contact_id)
        return _respond(DELETE_OK, [_item(c) for c in remaining], status_code=201)

    return app


app = create_app()
