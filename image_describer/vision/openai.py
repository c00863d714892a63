"""OpenAIVisionClient — OpenAI chat-completion vision backend."""
import logging

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from image_describer.constants import (
    MSG_IMAGE_DEFAULT_PROMPT,
    MSG_RESPONSE_STATUS,
    MSG_SENDING_IMAGE,
    MSG_TRANSPORT_FAILURE,
    OPENAI_BASE_URL,
    OPENAI_VISION_MODEL,
    VISION_MAX_TOKENS,
)
from image_describer.vision.client import VisionClient
from image_describer.vision.errors import MissingImage, TransportFailure
from image_describer.vision.schema import build_request, parse_response

logger = logging.getLogger(__name__)


def _transport_reason(exc: APIConnectionError) -> str:
    # The SDK wraps the httpx error; its description is the useful part.
    cause = exc.__cause__
    return str(cause) if cause is not None and str(cause) else str(exc)


class OpenAIVisionClient(VisionClient):
    """Sends one image + prompt to a chat-completion endpoint per call.

    ``http_client`` is handed straight to the SDK; pass an ``httpx.AsyncClient``
    with a custom transport to intercept requests.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = OPENAI_BASE_URL,
        model: str = OPENAI_VISION_MODEL,
        max_tokens: int = VISION_MAX_TOKENS,
        default_prompt: str = MSG_IMAGE_DEFAULT_PROMPT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        self._default_prompt = default_prompt
        self._client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url,
            max_retries=0,
            http_client=http_client,
        )

    async def analyze(self, image_bytes: bytes | None, prompt: str | None = None) -> str:
        match image_bytes:
            case None | b"":
                raise MissingImage()
            case _:
                pass

        request = build_request(
            image_bytes,
            self._default_prompt if prompt is None else prompt,
            self._model,
            self._max_tokens,
        )
        logger.debug(MSG_SENDING_IMAGE, len(image_bytes), self._model)

        try:
            raw = await self._client.chat.completions.with_raw_response.create(
                **request.model_dump()
            )
        except APIStatusError as exc:
            # Error statuses still carry a JSON body worth decoding.
            response = exc.response
        except APIConnectionError as exc:
            reason = _transport_reason(exc)
            logger.error(MSG_TRANSPORT_FAILURE, reason)
            raise TransportFailure(reason) from exc
        else:
            response = raw.http_response

        logger.debug(MSG_RESPONSE_STATUS, response.status_code)
        return parse_response(response.content)

    async def aclose(self) -> None:
        await self._client.close()

    async def __aenter__(self) -> "OpenAIVisionClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
