import logging
from functools import lru_cache
from typing import Any

from fastapi import Depends, FastAPI, File, HTTPException, Query, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from profashion.batch import Batch, build_config, get_batch, submit_batch, validate_request
from profashion.catalog import BUILT_IN_BACKGROUNDS, BUILT_IN_MODELS, POSES, SHOT_TYPE_OPTIONS
from profashion.config import BASE_URL, LOG_LEVEL, RESULTS_DIR, UPLOADS_DIR, VALID_UPLOAD_TYPES
from profashion.errors import UnprocessableImage
from profashion.gemini import get_client
from profashion.imaging import RawImage, extension_for_mime, normalize
from profashion.models import (
    BatchStatusResponse,
    DeleteItemsRequest,
    GalleryItem,
    GalleryItemView,
    GenerateRequest,
    GenerateResponse,
    HealthResponse,
    Project,
    ProjectView,
    ResultView,
    UploadResponse,
    ValidationResult,
)
from profashion.storage import GalleryStore, load_upload, save_upload, upload_kind

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="ProFashion Studio")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_store() -> GalleryStore:
    return GalleryStore()


def get_uploads_dir() -> str:
    return UPLOADS_DIR


def get_gemini_client() -> Any:
    try:
        return get_client()
    except RuntimeError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e


get_store()
app.mount("/results", StaticFiles(directory=RESULTS_DIR), name="results")


def _image_url(filename: str) -> str:
    return f"{BASE_URL}/results/{filename}"


def _item_view(item: GalleryItem) -> GalleryItemView:
    return GalleryItemView(
        id=item.id,
        project_id=item.project_id,
        pose_id=item.pose_id,
        image_url=_image_url(item.filename),
        created_at=item.created_at,
    )


def _project_view(project: Project) -> ProjectView:
    return ProjectView(
        id=project.id,
        created_at=project.created_at,
        item_count=project.item_count,
        thumbnail_url=_image_url(project.thumbnail) if project.thumbnail else None,
    )


def _result_views(batch: Batch, store: GalleryStore) -> list[ResultView]:
    views = []
    for result in batch.result_list():
        image_url = None
        if result.item_id:
            item = store.get_item(result.item_id)
            image_url = _image_url(item.filename) if item else None
        views.append(
            ResultView(pose_id=result.pose_id, loading=result.loading, error=result.error, image_url=image_url)
        )
    return views


@app.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok")


# --- catalogs ---


@app.get("/catalog/poses")
async def catalog_poses():
    return [pose.model_dump() for pose in POSES]


@app.get("/catalog/models")
async def catalog_models():
    return BUILT_IN_MODELS


@app.get("/catalog/backgrounds")
async def catalog_backgrounds():
    return BUILT_IN_BACKGROUNDS


@app.get("/catalog/shot-types")
async def catalog_shot_types():
    return SHOT_TYPE_OPTIONS


# --- studio workflow ---


@app.post("/uploads", response_model=UploadResponse)
async def upload_image(
    file: UploadFile = File(...),
    upload_type: str = Query(..., description="One of: garment, model, background"),
    uploads_dir: str = Depends(get_uploads_dir),
):
    if upload_type not in VALID_UPLOAD_TYPES:
        return JSONResponse(
            status_code=400,
            content={"status": "error", "error": f"Invalid upload_type. Must be one of {VALID_UPLOAD_TYPES}"},
        )

    content = await file.read()
    try:
        image = await normalize(RawImage(data=content, filename=file.filename or "", content_type=file.content_type))
    except UnprocessableImage as e:
        return JSONResponse(status_code=422, content={"status": "error", "error": str(e)})

    upload_id = save_upload(upload_type, image, uploads_dir)
    return UploadResponse(status="uploaded", upload_type=upload_type, upload_id=upload_id, mime_type=image.mime_type)


@app.post("/validate", response_model=ValidationResult)
async def validate(request: GenerateRequest) -> ValidationResult:
    return validate_request(request)


@app.post("/generate", response_model=GenerateResponse)
async def generate(
    request: GenerateRequest,
    store: GalleryStore = Depends(get_store),
    uploads_dir: str = Depends(get_uploads_dir),
    client: Any = Depends(get_gemini_client),
):
    validation = validate_request(request)
    if not validation.is_valid:
        return JSONResponse(
            status_code=400,
            content=GenerateResponse(status="error", missing_fields=validation.missing_fields).model_dump(),
        )

    for upload_id in request.garment_upload_ids:
        if upload_kind(upload_id) != "garment":
            return JSONResponse(
                status_code=400,
                content={"status": "error", "error": f"{upload_id} is not a garment upload"},
            )

    try:
        config = build_config(request, lambda upload_id: load_upload(upload_id, uploads_dir))
    except ValueError as e:
        return JSONResponse(status_code=400, content={"status": "error", "error": str(e)})

    batch = await submit_batch(config, store, client=client)
    return GenerateResponse(
        status="generating",
        project_id=batch.project_id,
        results=_result_views(batch, store),
    )


@app.get("/batches/{project_id}", response_model=BatchStatusResponse)
async def batch_status(project_id: str, store: GalleryStore = Depends(get_store)) -> BatchStatusResponse:
    batch = get_batch(project_id)
    if batch is None:
        raise HTTPException(status_code=404, detail=f"Batch {project_id} not found or expired")
    return BatchStatusResponse(
        project_id=project_id,
        completed=batch.completed,
        results=_result_views(batch, store),
    )


# --- gallery ---


@app.get("/projects", response_model=list[ProjectView])
async def list_projects(store: GalleryStore = Depends(get_store)) -> list[ProjectView]:
    return [_project_view(p) for p in store.list_projects()]


@app.delete("/projects/{project_id}")
async def delete_project(project_id: str, store: GalleryStore = Depends(get_store)):
    if store.get_project(project_id) is None:
        raise HTTPException(status_code=404, detail=f"Project {project_id} not found")
    store.delete_project(project_id)
    return {"status": "deleted", "id": project_id}


@app.get("/gallery", response_model=list[GalleryItemView])
async def list_gallery(
    project_id: str | None = None,
    store: GalleryStore = Depends(get_store),
) -> list[GalleryItemView]:
    return [_item_view(item) for item in store.list_items(project_id)]


@app.get("/gallery/{item_id}/download")
async def download_item(item_id: str, store: GalleryStore = Depends(get_store)):
    item = store.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found")
    image = store.read_image(item)
    filename = f"fashion-{item.pose_id}-{item.id[:8]}{extension_for_mime(item.mime_type)}"
    return Response(
        content=image.data,
        media_type=image.mime_type,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@app.delete("/gallery/{item_id}")
async def delete_item(item_id: str, store: GalleryStore = Depends(get_store)):
    if not store.delete_item(item_id):
        raise HTTPException(status_code=404, detail=f"Item {item_id} not found")
    return {"status": "deleted", "id": item_id}


@app.post("/gallery/delete")
async def delete_items(request: DeleteItemsRequest, store: GalleryStore = Depends(get_store)):
    deleted = store.delete_items(request.ids)
    return {"status": "deleted", "deleted": deleted}
