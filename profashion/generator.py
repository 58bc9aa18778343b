"""Per-pose generation: assemble inputs, render, verify, and retry once with feedback."""

import asyncio
import logging
from typing import Any

from google.genai import types

from profashion.catalog import builtin_background_url, builtin_model_url, get_pose
from profashion.config import (
    GENERATION_MODEL,
    OUTPUT_ASPECT_RATIO,
    OUTPUT_IMAGE_SIZE,
    STRICT_VERIFICATION,
)
from profashion.errors import GenerationFailure, NoImageProduced, UnprocessableImage
from profashion.gemini import first_inline_image, generate_content, image_part
from profashion.imaging import normalize
from profashion.models import ConsistencyProfile, EncodedImage, GenerationConfig, ImageSource
from profashion.prompts import build_prompt, corrective_instruction
from profashion.redaction import redact_face_if_present
from profashion.vision import check_identity, check_lighting

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 2


async def _resolve(source: ImageSource, kind: str) -> EncodedImage:
    """Uploads arrive normalized; catalog entries are fetched and normalized here."""
    if source.upload is not None:
        return source.upload
    url = builtin_model_url(source.builtin_id) if kind == "model" else builtin_background_url(source.builtin_id)
    if url is None:
        raise GenerationFailure(f"Unknown built-in {kind}: {source.builtin_id}")
    try:
        return await normalize(url)
    except UnprocessableImage as e:
        raise GenerationFailure(f"Could not load built-in {kind} {source.builtin_id}: {e}") from e


async def _no_background() -> None:
    return None


async def _prepare_inputs(
    config: GenerationConfig,
    client: Any = None,
) -> tuple[EncodedImage, EncodedImage | None, list[EncodedImage]]:
    background = _resolve(config.background, "background") if config.background else _no_background()
    model_image, background_image, garments = await asyncio.gather(
        _resolve(config.model, "model"),
        background,
        asyncio.gather(*(redact_face_if_present(g, client=client) for g in config.garments)),
    )
    return model_image, background_image, list(garments)


async def _render(
    prompt: str,
    model_image: EncodedImage,
    garments: list[EncodedImage],
    background: EncodedImage | None,
    client: Any = None,
) -> EncodedImage:
    contents: list[Any] = [prompt, image_part(model_image), *(image_part(g) for g in garments)]
    if background is not None:
        contents.append(image_part(background))

    try:
        response = await generate_content(
            GENERATION_MODEL,
            contents,
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(
                    aspect_ratio=OUTPUT_ASPECT_RATIO,
                    image_size=OUTPUT_IMAGE_SIZE,
                ),
            ),
            client=client,
        )
    except asyncio.TimeoutError as e:
        raise GenerationFailure("Generation timed out") from e
    except Exception as e:
        raise GenerationFailure(f"Generation failed: {e}") from e

    image = first_inline_image(response)
    if image is None:
        raise NoImageProduced("No image generated.")
    return image


async def generate_one(
    pose_id: str,
    config: GenerationConfig,
    profile: ConsistencyProfile,
    client: Any = None,
    strict: bool = STRICT_VERIFICATION,
) -> EncodedImage:
    """
    Render one pose of a batch.

    At most MAX_ATTEMPTS generation requests are issued. Every attempt but the
    last is checked for lighting and identity; a failed check feeds a corrective
    instruction into the next attempt. The last render is returned unchecked
    unless `strict` is set, in which case it must pass too.
    """
    pose = get_pose(pose_id)
    if pose is None:
        raise GenerationFailure(f"Pose {pose_id} not found")

    model_image, background, garments = await _prepare_inputs(config, client=client)

    corrections = ""
    for attempt in range(1, MAX_ATTEMPTS + 1):
        logger.info("Pose %s: attempt %d/%d", pose_id, attempt, MAX_ATTEMPTS)
        prompt = build_prompt(pose, config, profile, corrections)
        image = await _render(prompt, model_image, garments, background, client=client)

        final = attempt == MAX_ATTEMPTS
        if final and not strict:
            return image

        lighting, identity = await asyncio.gather(
            check_lighting(image, background, client=client),
            check_identity(model_image, image, client=client),
        )
        if lighting.passed and identity.passed:
            return image

        logger.info(
            "Pose %s: verification failed (lighting=%s, identity=%s)",
            pose_id, lighting.outcome.value, identity.outcome.value,
        )
        if final:
            raise GenerationFailure(f"Render for pose {pose_id} did not pass verification")
        corrections = corrective_instruction(
            identity_failed=not identity.passed,
            lighting_failed=not lighting.passed,
        )

    raise GenerationFailure(f"No render for pose {pose_id}")
