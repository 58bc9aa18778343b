import os
from dotenv import load_dotenv

load_dotenv()

GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
BASE_URL: str = os.getenv("BASE_URL", "http://localhost:8000")
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

GENERATION_MODEL: str = os.getenv("GENERATION_MODEL", "gemini-3-pro-image-preview")
VISION_MODEL: str = os.getenv("VISION_MODEL", "gemini-3-flash-preview")
OUTPUT_ASPECT_RATIO: str = os.getenv("OUTPUT_ASPECT_RATIO", "1:1")
OUTPUT_IMAGE_SIZE: str = os.getenv("OUTPUT_IMAGE_SIZE", "4K")

# Longest side of any image sent to the generation model
MAX_DIMENSION: int = int(os.getenv("MAX_DIMENSION", "1536"))
REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "180"))
# Verify the final attempt too and fail the pose instead of returning it
STRICT_VERIFICATION: bool = os.getenv("STRICT_VERIFICATION", "false").lower() in ("1", "true", "yes")

DATA_DIR: str = os.getenv("DATA_DIR", "data")
DB_PATH: str = os.path.join(DATA_DIR, "gallery.db")
RESULTS_DIR: str = os.path.join(DATA_DIR, "results")
UPLOADS_DIR: str = os.path.join(DATA_DIR, "uploads")

BATCH_TTL_SECONDS: int = int(os.getenv("BATCH_TTL_SECONDS", "3600"))

VALID_UPLOAD_TYPES: list[str] = ["garment", "model", "background"]
