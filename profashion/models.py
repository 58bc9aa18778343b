from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ShotType(str, Enum):
    FULL_BODY = "full_body"
    UPPER_BODY = "upper_body"
    LOWER_BODY = "lower_body"


class GarmentKind(str, Enum):
    SKIRT = "skirt"
    DRESS = "dress"
    TOP = "top"
    TROUSERS = "trousers"
    OUTERWEAR = "outerwear"
    OTHER = "other"


class EncodedImage(BaseModel):
    model_config = ConfigDict(frozen=True)

    mime_type: str
    data: bytes = Field(repr=False)


class ImageSource(BaseModel):
    """Either a catalog id or an already-normalized upload."""

    model_config = ConfigDict(frozen=True)

    builtin_id: str | None = None
    upload: EncodedImage | None = None

    @model_validator(mode="after")
    def _exactly_one(self) -> "ImageSource":
        if (self.builtin_id is None) == (self.upload is None):
            raise ValueError("ImageSource needs exactly one of builtin_id or upload")
        return self


class Pose(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    category: Literal["A", "B"]
    title: str
    description: str
    usage: str
    url: str
    hands_in_pocket: bool = False


class GenerationConfig(BaseModel):
    """Snapshot of the studio inputs, frozen when a batch is submitted."""

    model_config = ConfigDict(frozen=True)

    model: ImageSource
    background: ImageSource | None = None
    garments: tuple[EncodedImage, ...] = Field(min_length=1, max_length=5)
    pose_ids: tuple[str, ...] = Field(min_length=1, max_length=6)
    shot_type: ShotType
    gender: str | None = None
    ethnicity: str | None = None
    garment_kind: GarmentKind | None = None

    @field_validator("pose_ids")
    @classmethod
    def _unique_poses(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(set(value)) != len(value):
            raise ValueError("pose_ids must not repeat")
        return value


class ConsistencyProfile(BaseModel):
    model_config = ConfigDict(frozen=True)

    jewelry: str
    footwear: str
    handbag: str

    def as_prompt(self) -> str:
        return (
            "UNIFORM BATCH STYLE GUIDE:\n"
            f"- JEWELRY/ACCESSORIES: {self.jewelry}. Ensure all shots in this batch use this specific style.\n"
            f"- SHOES (If not overridden by Skirt Logic): {self.footwear}.\n"
            f"- HANDBAG (Optional): {self.handbag}.\n"
            "- IMPORTANT: If the user did not upload these items, YOU MUST GENERATE THEM "
            "CONSISTENTLY across all images."
        )


class GenerationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    pose_id: str
    image: EncodedImage | None = None
    item_id: str | None = None
    loading: bool = True
    error: str | None = None


class Project(BaseModel):
    id: str
    created_at: datetime
    requested_count: int
    item_count: int = 0
    thumbnail: str | None = None


class GalleryItem(BaseModel):
    id: str
    project_id: str
    pose_id: str
    filename: str
    mime_type: str
    created_at: datetime


class ValidationResult(BaseModel):
    is_valid: bool
    missing_fields: list[str] = []


# --- HTTP models ---


class HealthResponse(BaseModel):
    status: str


class UploadResponse(BaseModel):
    status: str
    upload_type: str
    upload_id: str
    mime_type: str


class ImageChoice(BaseModel):
    builtin_id: str | None = None
    upload_id: str | None = None


class GenerateRequest(BaseModel):
    model: ImageChoice | None = None
    background: ImageChoice | None = None
    garment_upload_ids: list[str] = []
    pose_ids: list[str] = []
    shot_type: ShotType | None = None
    gender: str | None = None
    ethnicity: str | None = None
    garment_kind: GarmentKind | None = None


class ResultView(BaseModel):
    pose_id: str
    loading: bool
    error: str | None = None
    image_url: str | None = None


class GenerateResponse(BaseModel):
    status: str
    project_id: str | None = None
    results: list[ResultView] = []
    missing_fields: list[str] = []
    error: str | None = None


class BatchStatusResponse(BaseModel):
    project_id: str
    completed: bool
    results: list[ResultView]


class ProjectView(BaseModel):
    id: str
    created_at: datetime
    item_count: int
    thumbnail_url: str | None = None


class GalleryItemView(BaseModel):
    id: str
    project_id: str
    pose_id: str
    image_url: str
    created_at: datetime


class DeleteItemsRequest(BaseModel):
    ids: list[str]
