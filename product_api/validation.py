"""
Field-shape checks for product payloads.

Both checks run the payload through a strict pydantic model and report
only the first failing field, in declaration order (name, description,
price, category, inStock).  Nothing beyond primitive types is checked:
a negative price is fine.
"""

from typing import Any, Dict, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from .errors import AppError
from .models import ProductCreate, ProductUpdate

CREATE_MESSAGES = {
    "name": "name is required and must be a string",
    "description": "description must be a string",
    "price": "price must be a number",
    "category": "category must be a string",
    "inStock": "inStock must be a boolean",
}

# name is only type-checked on update; blank names are accepted there.
UPDATE_MESSAGES = {**CREATE_MESSAGES, "name": "name must be a string"}

M = TypeVar("M", bound=BaseModel)


def _parse(model: Type[M], payload: Dict[str, Any], messages: Mapping[str, str]) -> M:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        loc = exc.errors()[0]["loc"]
        field = loc[0] if loc else None
        raise AppError.validation(messages.get(field))


def validate_create(payload: Dict[str, Any]) -> ProductCreate:
    """Every field must be present and well typed; raises AppError otherwise."""
    return _parse(ProductCreate, payload, CREATE_MESSAGES)


def validate_update(payload: Dict[str, Any]) -> ProductUpdate:
    """Fields are optional, but a field that is present must be well typed.

    A present ``null`` counts as present and fails its check.
    """
    return _parse(ProductUpdate, payload, UPDATE_MESSAGES)
