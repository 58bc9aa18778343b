"""Image normalization for transport and the region mask used for face redaction."""

import asyncio
import io
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import httpx
from PIL import Image, ImageDraw, ImageOps, UnidentifiedImageError

from profashion.config import MAX_DIMENSION
from profashion.errors import UnprocessableImage
from profashion.models import EncodedImage

logger = logging.getLogger(__name__)

STANDARD_MIME_TYPES = ("image/jpeg", "image/png")

MIME_BY_EXTENSION: dict[str, str] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".heic": "image/heic",
    ".heif": "image/heif",
    ".avif": "image/avif",
}

EXTENSION_BY_MIME: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "image/gif": ".gif",
    "image/heic": ".heic",
    "image/heif": ".heif",
    "image/avif": ".avif",
}


class NormalizeStrategy(str, Enum):
    REENCODED = "reencoded"
    RAW_PASSTHROUGH = "raw_passthrough"


@dataclass(frozen=True)
class Normalization:
    image: EncodedImage
    strategy: NormalizeStrategy


@dataclass(frozen=True)
class RawImage:
    """Bytes as received from an upload, before any decoding."""

    data: bytes
    filename: str = ""
    content_type: str | None = None


def mime_for_filename(filename: str) -> str | None:
    return MIME_BY_EXTENSION.get(Path(filename).suffix.lower())


def extension_for_mime(mime_type: str) -> str:
    return EXTENSION_BY_MIME.get(mime_type, ".bin")


def _reencode(data: bytes) -> EncodedImage:
    """Decode, orient, flatten and shrink so the longest side is at most MAX_DIMENSION."""
    img = Image.open(io.BytesIO(data))
    img.load()
    img = ImageOps.exif_transpose(img)
    if img.mode in ("RGBA", "LA", "P"):
        rgba = img.convert("RGBA")
        flat = Image.new("RGB", rgba.size, (255, 255, 255))
        flat.paste(rgba, mask=rgba.getchannel("A"))
        img = flat
    else:
        img = img.convert("RGB")
    if max(img.size) > MAX_DIMENSION:
        img.thumbnail((MAX_DIMENSION, MAX_DIMENSION), Image.LANCZOS)
    buf = io.BytesIO()
    img.save(buf, format="JPEG", quality=90)
    return EncodedImage(mime_type="image/jpeg", data=buf.getvalue())


def _raw_mime_type(raw: RawImage) -> str | None:
    declared = (raw.content_type or "").split(";")[0].strip().lower()
    if declared in EXTENSION_BY_MIME:
        return declared
    return mime_for_filename(raw.filename)


def normalize_bytes(raw: RawImage) -> Normalization:
    """Run the normalization strategies in order and report which one produced the payload."""
    if not raw.data:
        raise UnprocessableImage(f"Empty image: {raw.filename or 'upload'}")

    try:
        return Normalization(_reencode(raw.data), NormalizeStrategy.REENCODED)
    except (UnidentifiedImageError, OSError, ValueError) as e:
        logger.info("Local decode failed for %s (%s)", raw.filename or "image", e)

    mime_type = _raw_mime_type(raw)
    if mime_type is None:
        raise UnprocessableImage(f"Unsupported image format: {raw.filename or 'upload'}")
    if mime_type in STANDARD_MIME_TYPES:
        # Pillow reads these natively, so a failed decode means corrupt bytes
        raise UnprocessableImage(f"Corrupt {mime_type} image: {raw.filename or 'upload'}")
    return Normalization(
        EncodedImage(mime_type=mime_type, data=raw.data),
        NormalizeStrategy.RAW_PASSTHROUGH,
    )


async def _download(url: str) -> tuple[bytes, str | None]:
    """Download raw bytes and the declared content type from URL."""
    async with httpx.AsyncClient(follow_redirects=True) as client:
        resp = await client.get(url)
        resp.raise_for_status()
    return resp.content, resp.headers.get("content-type")


async def load_raw(url_or_path: str) -> RawImage:
    """Load raw image bytes from a local path or URL."""
    path = Path(url_or_path)
    if not url_or_path.startswith(("http://", "https://")) and path.exists():
        return RawImage(data=path.read_bytes(), filename=path.name)
    try:
        data, content_type = await _download(url_or_path)
    except httpx.HTTPError as e:
        raise UnprocessableImage(f"Could not fetch image {url_or_path}: {e}") from e
    return RawImage(data=data, filename=Path(httpx.URL(url_or_path).path).name, content_type=content_type)


async def normalize(source: RawImage | str) -> EncodedImage:
    """Turn an upload or a catalog reference into a transport-ready payload."""
    raw = source if isinstance(source, RawImage) else await load_raw(source)
    result = await asyncio.to_thread(normalize_bytes, raw)
    return result.image


def expanded_box(
    box: tuple[float, float, float, float],
    size: tuple[int, int],
    margin: float = 0.1,
) -> tuple[int, int, int, int]:
    """Pixel rectangle (left, top, right, bottom; right/bottom exclusive) for a
    normalized [ymin, xmin, ymax, xmax] box grown by `margin` of its size per side."""
    width, height = size
    ymin, xmin, ymax, xmax = box
    dx = (xmax - xmin) * margin
    dy = (ymax - ymin) * margin
    left = max(0, round((xmin - dx) * width))
    top = max(0, round((ymin - dy) * height))
    right = min(width, round((xmax + dx) * width))
    bottom = min(height, round((ymax + dy) * height))
    return left, top, right, bottom


def mask_region(
    image: EncodedImage,
    box: tuple[float, float, float, float],
    color: tuple[int, int, int] = (0xBB, 0xBB, 0xBB),
) -> EncodedImage:
    """Paint an opaque rectangle over the expanded box. Output is always PNG so
    pixels outside the box survive unchanged."""
    img = Image.open(io.BytesIO(image.data))
    img.load()
    img = img.convert("RGBA") if img.mode in ("RGBA", "LA", "P") else img.convert("RGB")
    left, top, right, bottom = expanded_box(box, img.size)
    if right > left and bottom > top:
        fill = color + (255,) if img.mode == "RGBA" else color
        ImageDraw.Draw(img).rectangle([left, top, right - 1, bottom - 1], fill=fill)

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return EncodedImage(mime_type="image/png", data=buf.getvalue())
