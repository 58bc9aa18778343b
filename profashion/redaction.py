"""Hide faces in garment reference photos before they reach the generation model."""

import asyncio
import logging
from typing import Any

from profashion.imaging import STANDARD_MIME_TYPES, mask_region
from profashion.models import EncodedImage
from profashion.vision import FaceOutcome, detect_face

logger = logging.getLogger(__name__)

MASK_COLOR = (0xBB, 0xBB, 0xBB)


async def redact_face_if_present(image: EncodedImage, client: Any = None) -> EncodedImage:
    """Grey out a detected face; any failure returns `image` untouched."""
    if image.mime_type not in STANDARD_MIME_TYPES:
        logger.warning("Skipping face masking on non-standard format %s", image.mime_type)
        return image

    detection = await detect_face(image, client=client)
    if detection.outcome is not FaceOutcome.FACE_FOUND:
        logger.debug("Garment left as is (%s)", detection.outcome.value)
        return image

    try:
        masked = await asyncio.to_thread(mask_region, image, detection.box, MASK_COLOR)
    except OSError as e:
        logger.warning("Face masking failed, using original garment image: %s", e)
        return image
    logger.info("Face detected in garment and masked")
    return masked
