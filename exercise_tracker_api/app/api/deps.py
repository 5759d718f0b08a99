"""
Request helpers shared by the endpoints.

Bodies may arrive as JSON or as HTML form data, so endpoints read them
with ``read_payload`` instead of declaring a pydantic body parameter,
and validate them with ``parse_payload``.  Both raise the tracker's
``ValidationError`` so that bad input is reported the same way as any
other failure of the route.
"""

from typing import Any, Dict, Mapping, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..core.errors import ValidationError

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Return the request body as a dict, whether JSON or form encoded.

    A request without a body (or with an unknown content type) yields an
    empty dict, leaving required-field checks to ``parse_payload``.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = await request.json()
    except ValueError as exc:
        raise ValidationError("Request body is not valid JSON") from exc
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def parse_payload(model: Type[ModelT], payload: Mapping[str, Any]) -> ModelT:
    """Validate ``payload`` against ``model``."""
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError(str(exc)) from exc
