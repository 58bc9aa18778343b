"""Batch orchestration: validate -> project + style profile -> fan out poses -> join."""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable

from profashion.catalog import builtin_background_url, builtin_model_url, get_pose
from profashion.config import BATCH_TTL_SECONDS
from profashion.generator import generate_one
from profashion.models import (
    ConsistencyProfile,
    EncodedImage,
    GenerateRequest,
    GenerationConfig,
    GenerationResult,
    ImageChoice,
    ImageSource,
    ValidationResult,
)
from profashion.profile import generate_profile
from profashion.storage import GalleryStore
from profashion.vision import classify_garments

logger = logging.getLogger(__name__)

MAX_GARMENTS = 5
MAX_POSES = 6

Observer = Callable[["Batch", GenerationResult | None], None]
Generator = Callable[..., Awaitable[EncodedImage]]
UploadLoader = Callable[[str], EncodedImage | None]


@dataclass
class Batch:
    """In-flight state of one batch. Observers get each settled result, then None once all are terminal."""

    project_id: str
    config: GenerationConfig
    profile: ConsistencyProfile
    results: dict[str, GenerationResult]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    completed: bool = False
    task: asyncio.Task | None = None
    _observers: list[Observer] = field(default_factory=list)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        self._observers.append(observer)
        return lambda: self._observers.remove(observer)

    def result_list(self) -> list[GenerationResult]:
        return [self.results[pose_id] for pose_id in self.config.pose_ids]

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results.values() if not r.loading and r.error is None)

    def _settle(self, result: GenerationResult) -> None:
        current = self.results[result.pose_id]
        if not current.loading:
            raise RuntimeError(f"Pose {result.pose_id} already settled")
        self.results[result.pose_id] = result
        self._notify(result)

    def _finish(self) -> None:
        self.completed = True
        self._notify(None)

    def _notify(self, result: GenerationResult | None) -> None:
        for observer in list(self._observers):
            try:
                observer(self, result)
            except Exception:
                logger.exception("Batch observer failed for project %s", self.project_id)


_batches: dict[str, Batch] = {}


def get_batch(project_id: str) -> Batch | None:
    return _batches.get(project_id)


def _cleanup_expired() -> None:
    """Forget completed batches older than TTL."""
    now = datetime.now(timezone.utc)
    expired = [
        pid for pid, b in _batches.items()
        if b.completed and (now - b.created_at).total_seconds() > BATCH_TTL_SECONDS
    ]
    for pid in expired:
        del _batches[pid]


def _choice_missing(choice: ImageChoice | None) -> bool:
    return choice is None or not (choice.builtin_id or choice.upload_id)


def validate_request(request: GenerateRequest) -> ValidationResult:
    """Gate for the generate action: every studio input must be present and known."""
    missing: list[str] = []
    if not request.garment_upload_ids:
        missing.append("Upload garment photos")
    elif len(request.garment_upload_ids) > MAX_GARMENTS:
        missing.append(f"Upload at most {MAX_GARMENTS} garment photos")

    if _choice_missing(request.model):
        missing.append("Select or upload a model")
    elif request.model.builtin_id and builtin_model_url(request.model.builtin_id) is None:
        missing.append(f"Unknown model: {request.model.builtin_id}")

    if _choice_missing(request.background):
        missing.append("Select a scene background")
    elif request.background.builtin_id and builtin_background_url(request.background.builtin_id) is None:
        missing.append(f"Unknown background: {request.background.builtin_id}")

    if not request.pose_ids:
        missing.append("Select shooting poses")
    elif len(request.pose_ids) > MAX_POSES:
        missing.append(f"Select at most {MAX_POSES} poses")
    else:
        missing.extend(f"Unknown pose: {pid}" for pid in request.pose_ids if get_pose(pid) is None)

    if request.shot_type is None:
        missing.append("Select shot composition")

    return ValidationResult(is_valid=not missing, missing_fields=missing)


def _source(choice: ImageChoice, load_upload: UploadLoader) -> ImageSource:
    if choice.upload_id:
        image = load_upload(choice.upload_id)
        if image is None:
            raise ValueError(f"Upload {choice.upload_id} not found")
        return ImageSource(upload=image)
    return ImageSource(builtin_id=choice.builtin_id)


def build_config(request: GenerateRequest, load_upload: UploadLoader) -> GenerationConfig:
    """Snapshot a validated request into an immutable config, reading uploads now."""
    garments = []
    for upload_id in request.garment_upload_ids:
        image = load_upload(upload_id)
        if image is None:
            raise ValueError(f"Upload {upload_id} not found")
        garments.append(image)

    return GenerationConfig(
        model=_source(request.model, load_upload),
        background=_source(request.background, load_upload) if request.background else None,
        garments=tuple(garments),
        pose_ids=tuple(dict.fromkeys(request.pose_ids)),
        shot_type=request.shot_type,
        gender=request.gender,
        ethnicity=request.ethnicity,
        garment_kind=request.garment_kind,
    )


async def start_batch(
    config: GenerationConfig,
    store: GalleryStore,
    rng: random.Random | None = None,
) -> Batch:
    """Create the project and the shared style profile before any pose request."""
    _cleanup_expired()

    project = await asyncio.to_thread(store.create_project, len(config.pose_ids))
    batch = Batch(
        project_id=project.id,
        config=config,
        profile=generate_profile(rng),
        results={pid: GenerationResult(pose_id=pid) for pid in config.pose_ids},
    )
    _batches[project.id] = batch
    logger.info("Batch %s started with poses %s", project.id, ", ".join(config.pose_ids))
    return batch


async def _run_pose(
    batch: Batch,
    pose_id: str,
    config: GenerationConfig,
    store: GalleryStore,
    generate: Generator,
    client: Any,
) -> None:
    try:
        image = await generate(pose_id, config, batch.profile, client=client)
    except Exception as e:
        logger.warning("Batch %s: pose %s failed: %s", batch.project_id, pose_id, e)
        batch._settle(GenerationResult(pose_id=pose_id, loading=False, error=str(e) or "Failed"))
        return

    try:
        item = await asyncio.to_thread(store.append_item, batch.project_id, pose_id, image)
    except Exception as e:
        logger.exception("Batch %s: could not save pose %s", batch.project_id, pose_id)
        batch._settle(GenerationResult(pose_id=pose_id, image=image, loading=False, error=f"Not saved: {e}"))
        return

    batch._settle(GenerationResult(pose_id=pose_id, image=image, item_id=item.id, loading=False))


async def run_batch(
    batch: Batch,
    store: GalleryStore,
    generate: Generator = generate_one,
    client: Any = None,
) -> Batch:
    """Render every pose concurrently; one pose failing never touches its siblings."""
    config = batch.config
    if config.garment_kind is None:
        kind = await classify_garments(list(config.garments), client=client)
        if kind is not None:
            config = config.model_copy(update={"garment_kind": kind})
            batch.config = config

    try:
        await asyncio.gather(
            *(_run_pose(batch, pid, config, store, generate, client) for pid in config.pose_ids)
        )
    finally:
        batch._finish()
    logger.info(
        "Batch %s done: %d/%d poses succeeded",
        batch.project_id, batch.succeeded, len(config.pose_ids),
    )
    return batch


async def submit_batch(
    config: GenerationConfig,
    store: GalleryStore,
    generate: Generator = generate_one,
    client: Any = None,
) -> Batch:
    """Start a batch and keep rendering in the background."""
    batch = await start_batch(config, store)
    batch.task = asyncio.create_task(run_batch(batch, store, generate=generate, client=client))
    return batch
