from typing import Annotated, Any, Optional

from bson import ObjectId
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

# ObjectId values coming out of motor are rendered as their 24-hex string.
PyObjectId = Annotated[str, BeforeValidator(lambda v: str(v) if isinstance(v, ObjectId) else v)]


class CamelModel(BaseModel):
    """Base schema for payloads exchanged in the driver's camelCase shape.

    Fields are declared in snake_case and serialized under camelCase aliases;
    both spellings are accepted on input.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertResult(CamelModel):
    acknowledged: bool = True
    inserted_id: Optional[PyObjectId] = None
    message: str


class UpdateResult(CamelModel):
    acknowledged: bool = True
    matched_count: int = 0
    modified_count: int = 0
    message: str


class DeleteResult(CamelModel):
    acknowledged: bool = True
    deleted_count: int = 0
    message: str


def encode_documents(documents: list[dict[str, Any]]) -> list[Any]:
    """JSON-ready copies of raw documents for passthrough collections."""
    return jsonable_encoder(documents, custom_encoder={ObjectId: str})


_email_adapter = TypeAdapter(EmailStr)


def normalize_email(value: str) -> str:
    """Canonical form ``EmailStr`` stores (domain lowercased).

    Strings that are not valid addresses are returned unchanged so lookups
    on them simply miss.
    """
    try:
        return _email_adapter.validate_python(value)
    except PydanticValidationError:
        return value
