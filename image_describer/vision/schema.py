"""Typed chat-completion request/response structures.

The response side is validated at the parse boundary: a body either matches
the error envelope, one of the two known completion shapes, or it is
rejected as malformed. No partial extraction is attempted.
"""
import base64
import json
import logging
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, ValidationError

from image_describer.constants import DATA_URI_TEMPLATE, IMAGE_MEDIA_TYPE, MSG_REMOTE_ERROR
from image_describer.vision.errors import MalformedResponse, RemoteError

logger = logging.getLogger(__name__)


# ── request ───────────────────────────────────────────────────────────────────


class TextPart(BaseModel):
    type: Literal["text"] = "text"
    text: str


class ImageUrl(BaseModel):
    url: str


class ImageUrlPart(BaseModel):
    type: Literal["image_url"] = "image_url"
    image_url: ImageUrl


class UserMessage(BaseModel):
    role: Literal["user"] = "user"
    content: list[TextPart | ImageUrlPart]


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[UserMessage]
    max_tokens: int


def encode_data_uri(image_bytes: bytes) -> str:
    image_data = base64.standard_b64encode(image_bytes).decode()
    return DATA_URI_TEMPLATE % (IMAGE_MEDIA_TYPE, image_data)


def build_request(
    image_bytes: bytes, prompt: str, model: str, max_tokens: int
) -> ChatCompletionRequest:
    """One user message: the prompt text first, then the inline image."""
    return ChatCompletionRequest(
        model=model,
        messages=[
            UserMessage(
                content=[
                    TextPart(text=prompt),
                    ImageUrlPart(image_url=ImageUrl(url=encode_data_uri(image_bytes))),
                ]
            )
        ],
        max_tokens=max_tokens,
    )


# ── response ──────────────────────────────────────────────────────────────────


class ErrorDetail(BaseModel):
    message: str


class ErrorEnvelope(BaseModel):
    error: ErrorDetail


class ContentPart(BaseModel):
    text: str


class ResponseMessage(BaseModel):
    content: str | Annotated[list[Any], Field(min_length=1)]


class Choice(BaseModel):
    message: ResponseMessage


class ChatCompletionResponse(BaseModel):
    # Only choices[0] is read, so later choices are not validated.
    choices: list[Any] = Field(min_length=1)

    def description(self) -> str:
        """Text of the first choice, plain string or first content part.

        Raises ValidationError when the first choice matches neither shape.
        """
        match Choice.model_validate(self.choices[0]).message.content:
            case str() as text:
                return text
            case [first, *_]:
                return ContentPart.model_validate(first).text


def parse_response(body: bytes) -> str:
    """Decode a chat-completion body into the description text.

    Raises RemoteError for an ``error.message`` payload and MalformedResponse
    for anything that is not one of the two known success shapes.
    """
    try:
        data = json.loads(body)
    except ValueError as exc:
        raise MalformedResponse() from exc

    try:
        envelope = ErrorEnvelope.model_validate(data)
    except ValidationError:
        pass
    else:
        logger.warning(MSG_REMOTE_ERROR, envelope.error.message)
        raise RemoteError(envelope.error.message)

    try:
        return ChatCompletionResponse.model_validate(data).description()
    except ValidationError as exc:
        raise MalformedResponse() from exc
