"""Errors raised by the contact service. The API layer maps every ContactError to HTTP 400."""

MISSING_FIELDS_MESSAGE = "As propriedades Nome e Telefone são obrigatórias"
INVALID_PHONE_MESSAGE = (
    "O telefone é inválido. Por favor, informe o DDD e o telefone corretamente."
)
DUPLICATE_PHONE_MESSAGE = "Telefone já cadastrado em sua lista de contatos. Verifique!"
NOT_FOUND_MESSAGE = "Contato não encontrado. Verifique o ID informado."


class ContactError(Exception):
    """Base class. `message` is the user-facing text sent back in the response envelope."""

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ContactError, ValueError):
    """Missing name/phone, or phone not 11 digits after normalization."""

    default_message = INVALID_PHONE_MESSAGE


class ConflictError(ContactError):
    """Normalized phone already held by another contact."""

    default_message = DUPLICATE_PHONE_MESSAGE


class NotFoundError(ContactError):
    def __init__(self, contact_id: str, message: str | None = None) -> None:
        self.contact_id = contact_id
        super().__init__(message or NOT_FOUND_MESSAGE)
