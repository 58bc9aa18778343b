"""Shared google-genai client and the bounded call used by every capability."""

import asyncio
from functools import lru_cache
from typing import Any

from google import genai
from google.genai import types

from profashion.config import GEMINI_API_KEY, REQUEST_TIMEOUT_SECONDS
from profashion.models import EncodedImage


@lru_cache(maxsize=1)
def get_client() -> genai.Client:
    if not GEMINI_API_KEY:
        raise RuntimeError("GEMINI_API_KEY is not set")
    return genai.Client(api_key=GEMINI_API_KEY)


def image_part(image: EncodedImage) -> types.Part:
    return types.Part.from_bytes(data=image.data, mime_type=image.mime_type)


async def generate_content(
    model: str,
    contents: list[Any],
    config: types.GenerateContentConfig | None = None,
    client: Any = None,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> types.GenerateContentResponse:
    """Run one generate_content call off the event loop, bounded by `timeout`."""
    client = client or get_client()
    return await asyncio.wait_for(
        asyncio.to_thread(
            client.models.generate_content,
            model=model,
            contents=contents,
            config=config,
        ),
        timeout=timeout,
    )


def first_inline_image(response: types.GenerateContentResponse) -> EncodedImage | None:
    for candidate in response.candidates or []:
        if candidate.content is None:
            continue
        for part in candidate.content.parts or []:
            blob = part.inline_data
            if blob is not None and blob.data:
                return EncodedImage(mime_type=blob.mime_type or "image/png", data=blob.data)
    return None
