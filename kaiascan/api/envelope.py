"""
envelope.py

Decoding of the ``{"code", "data", "msg"}`` envelope returned by every
endpoint.

Decoding happens in two phases. The body is first validated as an envelope
with an untyped payload; a body that is not JSON or lacks an integer ``code``
raises ``DecodeError``. A structurally valid envelope with a non-zero code
then raises ``ApiError`` and its payload is dropped. Only for successful
envelopes is ``data`` validated against the requested payload model.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from kaiascan.api.errors import ApiError, DecodeError

T = TypeVar("T")

SUCCESS_CODE = 0


class ApiEnvelope(BaseModel, Generic[T]):
    """
    A decoded API response.

    Attributes:
        code (int): Application status code; 0 means success.
        data (Optional[T]): The payload. Only meaningful when ``code`` is 0.
        message (str): Human readable status message (``msg`` on the wire).
    """
    model_config = ConfigDict(populate_by_name=True)

    code: int = Field(..., strict=True, description="Application status code")
    data: Optional[T] = Field(None, description="Response payload")
    message: str = Field("", alias="msg", description="Status message")

    @property
    def ok(self) -> bool:
        return self.code == SUCCESS_CODE


def decode_envelope(raw: bytes, model: Optional[Any] = None) -> ApiEnvelope:
    """
    Decodes a response body into an ``ApiEnvelope``.

    :param raw: Raw response body.
    :param model: Optional type (usually a pydantic model) to validate ``data``
        against. Without it the raw JSON value is returned.
    :return: The successful envelope.
    :raises DecodeError: If the body is not a JSON envelope or ``data`` does not match ``model``.
    :raises ApiError: If the envelope carries a non-zero code.
    """
    try:
        envelope = ApiEnvelope[Any].model_validate_json(raw)
    except PydanticValidationError as err:
        raise DecodeError(f"Error unmarshalling response: {err}") from err

    if envelope.code != SUCCESS_CODE:
        raise ApiError(envelope.code, envelope.message)

    if model is None or envelope.data is None:
        return envelope

    try:
        data = TypeAdapter(model).validate_python(envelope.data)
    except PydanticValidationError as err:
        raise DecodeError(f"Response data does not match {getattr(model, '__name__', model)}: {err}") from err

    return ApiEnvelope[model](code=envelope.code, data=data, message=envelope.message)
