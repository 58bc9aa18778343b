import io
import json
import os
import tempfile
import threading
from dataclasses import dataclass
from typing import Any, Callable

# Keep the app's data directory out of the working tree
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="profashion-test-"))

import pytest
from google.genai import types
from PIL import Image

from profashion.config import GENERATION_MODEL
from profashion.models import EncodedImage, GenerationConfig, ImageSource, ShotType
from profashion.storage import GalleryStore


def make_image_bytes(size=(64, 64), color=(200, 30, 30), fmt="PNG") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format=fmt)
    return buf.getvalue()


def make_encoded(size=(64, 64), color=(200, 30, 30)) -> EncodedImage:
    return EncodedImage(mime_type="image/png", data=make_image_bytes(size, color))


def make_config(**overrides) -> GenerationConfig:
    fields = {
        "model": ImageSource(upload=make_encoded(color=(10, 10, 200))),
        "background": ImageSource(upload=make_encoded(color=(10, 200, 10))),
        "garments": (make_encoded(),),
        "pose_ids": ("A1",),
        "shot_type": ShotType.FULL_BODY,
    }
    fields.update(overrides)
    return GenerationConfig(**fields)


def prompt_text(contents: list[Any]) -> str:
    return "\n".join(c for c in contents if isinstance(c, str))


def image_response(data: bytes, mime_type: str = "image/png") -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part.from_bytes(data=data, mime_type=mime_type)])
            )
        ]
    )


def text_response(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=[types.Part(text=text)]))]
    )


def json_response(payload: dict) -> types.GenerateContentResponse:
    return text_response(json.dumps(payload))


@dataclass
class Call:
    model: str
    contents: list[Any]
    config: Any

    @property
    def prompt(self) -> str:
        return prompt_text(self.contents)


class FakeModels:
    def __init__(self, handler: Callable[[Call], types.GenerateContentResponse]):
        self.handler = handler
        self.calls: list[Call] = []
        self._lock = threading.Lock()

    def generate_content(self, *, model, contents, config=None):
        call = Call(model, list(contents), config)
        with self._lock:
            self.calls.append(call)
        return self.handler(call)


class FakeClient:
    """Stands in for genai.Client; answers through a handler and records every call."""

    def __init__(self, handler):
        self.models = FakeModels(handler)

    @property
    def calls(self) -> list[Call]:
        return self.models.calls

    def generation_calls(self) -> list[Call]:
        return [c for c in self.calls if c.model == GENERATION_MODEL]

    def calls_mentioning(self, text: str) -> list[Call]:
        return [c for c in self.calls if text in c.prompt]


def studio_handler(
    face: dict | None = None,
    lighting: bool = True,
    identity: bool = True,
    garment: str = "top",
    image: bytes | None = None,
):
    """Answer every capability the pipeline uses with fixed verdicts."""
    rendered = image or make_image_bytes(color=(120, 120, 120))

    def handler(call: Call) -> types.GenerateContentResponse:
        if call.model == GENERATION_MODEL:
            return image_response(rendered)
        prompt = call.prompt
        if "HUMAN FACE" in prompt:
            return json_response(face or {"has_face": False, "box_2d": []})
        if "Senior Art Director" in prompt:
            return json_response({"passed": lighting, "reason": "lighting"})
        if "Compare identity" in prompt:
            return json_response({"passed": identity, "reason": "identity"})
        if "Classify the main garment" in prompt:
            return json_response({"kind": garment})
        raise AssertionError(f"Unexpected request: {prompt[:80]}")

    return handler


@pytest.fixture
def store(tmp_path) -> GalleryStore:
    return GalleryStore(tmp_path / "gallery.db", tmp_path / "results")
