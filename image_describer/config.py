from dataclasses import dataclass
from typing import Optional
import os
from dotenv import load_dotenv

from image_describer.constants import (
    DEFAULT_LOG_LEVEL,
    MSG_IMAGE_DEFAULT_PROMPT,
    OPENAI_BASE_URL,
    OPENAI_VISION_MODEL,
    VISION_MAX_TOKENS,
)


@dataclass(frozen=True)
class Config:
    openai_api_key: str
    openai_base_url: str
    vision_model: str
    vision_max_tokens: int
    default_prompt: str
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        api_key = os.getenv("OPENAI_API_KEY")
        base_url = os.getenv("OPENAI_BASE_URL") or OPENAI_BASE_URL
        model = os.getenv("VISION_MODEL") or OPENAI_VISION_MODEL
        raw_max_tokens = os.getenv("VISION_MAX_TOKENS", str(VISION_MAX_TOKENS))
        prompt = os.getenv("VISION_PROMPT") or MSG_IMAGE_DEFAULT_PROMPT
        log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

        return cls._validate(
            openai_api_key=api_key,
            openai_base_url=base_url.rstrip("/"),
            vision_model=model,
            raw_max_tokens=raw_max_tokens,
            default_prompt=prompt,
            log_level=log_level,
        )

    @staticmethod
    def _validate(
        openai_api_key: Optional[str],
        openai_base_url: str,
        vision_model: str,
        raw_max_tokens: str,
        default_prompt: str,
        log_level: str,
    ) -> "Config":
        match openai_api_key:
            case None:
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case str() as key if not key.strip():
                raise ValueError("OPENAI_API_KEY must be set in .env")
            case _:
                pass

        match raw_max_tokens.strip():
            case str() as n if n.isdigit() and int(n) > 0:
                max_tokens = int(n)
            case _:
                raise ValueError(
                    f"VISION_MAX_TOKENS must be a positive integer, got {raw_max_tokens!r}"
                )

        return Config(
            openai_api_key=openai_api_key.strip(),
            openai_base_url=openai_base_url,
            vision_model=vision_model,
            vision_max_tokens=max_tokens,
            default_prompt=default_prompt,
            log_level=log_level,
        )
