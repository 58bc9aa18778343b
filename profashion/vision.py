"""Gemini vision checks: face detection, render verification, garment classification.

Every check here is advisory. A failing or malformed answer is reported as a
named outcome and never raised, so callers can fall open.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from google.genai import types
from pydantic import BaseModel, ValidationError

from profashion.config import VISION_MODEL
from profashion.gemini import generate_content, image_part
from profashion.models import EncodedImage, GarmentKind

logger = logging.getLogger(__name__)

FACE_PROMPT = """Analyze this fashion garment image.
Detect the bounding box of the HUMAN FACE / HEAD.
Return JSON: { "has_face": boolean, "box_2d": [ymin, xmin, ymax, xmax] }
(Normalized coordinates 0-1).
If no face is clearly visible, set has_face to false."""

LIGHTING_PROMPT = """Act as a Senior Art Director.
The first image is a generated fashion photograph{background_note}.
Pass if the lighting on the model (direction, temperature, softness, shadows) is consistent with the scene.
Return JSON {{ "passed": boolean, "reason": string }}"""

IDENTITY_PROMPT = """Compare identity.
Does the person in the Generated image have the same face, skin tone and body type as the person in the Reference image?
Return JSON { "passed": boolean, "reason": string }"""

GARMENT_PROMPT = """Classify the main garment shown across these product images.
Return JSON { "kind": one of "skirt", "dress", "top", "trousers", "outerwear", "other" }"""


class FaceCheck(BaseModel):
    has_face: bool
    box_2d: list[float] = []


class Verdict(BaseModel):
    passed: bool
    reason: str = ""


class GarmentCheck(BaseModel):
    kind: GarmentKind


class FaceOutcome(str, Enum):
    FACE_FOUND = "face_found"
    NO_FACE = "no_face"
    SKIPPED_FORMAT = "skipped_format"
    DETECTOR_FAILED = "detector_failed"


@dataclass(frozen=True)
class FaceDetection:
    outcome: FaceOutcome
    box: tuple[float, float, float, float] | None = None


class CheckOutcome(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class CheckResult:
    outcome: CheckOutcome
    reason: str = ""

    @property
    def passed(self) -> bool:
        # A verifier that could not answer never blocks a render
        return self.outcome is not CheckOutcome.FAILED


def _extract_json(text: str) -> dict:
    """Strip markdown code fences if present, then parse JSON."""
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1].rsplit("```", 1)[0]
    return json.loads(text)


async def _ask(contents: list[Any], schema: type[BaseModel], client: Any = None) -> BaseModel:
    response = await generate_content(
        VISION_MODEL,
        contents,
        config=types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=schema,
        ),
        client=client,
    )
    if not response.text:
        raise ValueError("empty response")
    return schema(**_extract_json(response.text))


def _normalize_box(values: list[float]) -> tuple[float, float, float, float] | None:
    if len(values) != 4:
        return None
    # Gemini often answers on its native 0-1000 grid
    if any(v > 1.0 for v in values):
        values = [v / 1000.0 for v in values]
    ymin, xmin, ymax, xmax = (min(max(v, 0.0), 1.0) for v in values)
    if ymax <= ymin or xmax <= xmin:
        return None
    return ymin, xmin, ymax, xmax


async def detect_face(image: EncodedImage, client: Any = None) -> FaceDetection:
    try:
        check = await _ask([image_part(image), FACE_PROMPT], FaceCheck, client)
    except (ValidationError, ValueError) as e:
        logger.warning("Face detection returned no usable answer: %s", e)
        return FaceDetection(FaceOutcome.DETECTOR_FAILED)
    except Exception as e:
        logger.warning("Face detection failed: %s", e)
        return FaceDetection(FaceOutcome.DETECTOR_FAILED)

    if not check.has_face:
        return FaceDetection(FaceOutcome.NO_FACE)
    box = _normalize_box(check.box_2d)
    if box is None:
        logger.warning("Face detection reported an unusable box: %s", check.box_2d)
        return FaceDetection(FaceOutcome.DETECTOR_FAILED)
    return FaceDetection(FaceOutcome.FACE_FOUND, box)


async def _verdict(name: str, contents: list[Any], client: Any = None) -> CheckResult:
    try:
        verdict = await _ask(contents, Verdict, client)
    except Exception as e:
        logger.warning("%s check skipped: %s", name, e)
        return CheckResult(CheckOutcome.SKIPPED, "Skip")
    outcome = CheckOutcome.PASSED if verdict.passed else CheckOutcome.FAILED
    return CheckResult(outcome, verdict.reason)


async def check_lighting(
    generated: EncodedImage,
    background: EncodedImage | None = None,
    client: Any = None,
) -> CheckResult:
    contents: list[Any] = [image_part(generated)]
    note = ""
    if background is not None:
        contents.append(image_part(background))
        note = " and the second image is the background scene it was composited into"
    contents.append(LIGHTING_PROMPT.format(background_note=note))
    return await _verdict("Lighting", contents, client)


async def check_identity(
    reference: EncodedImage,
    generated: EncodedImage,
    client: Any = None,
) -> CheckResult:
    contents = ["Reference", image_part(reference), "Generated", image_part(generated), IDENTITY_PROMPT]
    return await _verdict("Identity", contents, client)


async def classify_garments(garments: list[EncodedImage], client: Any = None) -> GarmentKind | None:
    """Best-effort garment type; None when the classifier cannot answer."""
    try:
        check = await _ask([*(image_part(g) for g in garments), GARMENT_PROMPT], GarmentCheck, client)
    except Exception as e:
        logger.warning("Garment classification failed: %s", e)
        return None
    return check.kind
