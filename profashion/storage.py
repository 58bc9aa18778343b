"""Gallery/project records (sqlite) plus result and upload files on disk."""

import re
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator

from profashion.config import DB_PATH, RESULTS_DIR, UPLOADS_DIR, VALID_UPLOAD_TYPES
from profashion.imaging import extension_for_mime, mime_for_filename
from profashion.models import EncodedImage, GalleryItem, Project

_SCHEMA = """
CREATE TABLE IF NOT EXISTS projects (
    id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL,
    requested_count INTEGER NOT NULL,
    item_count INTEGER NOT NULL DEFAULT 0,
    thumbnail TEXT
);
CREATE TABLE IF NOT EXISTS gallery_items (
    id TEXT PRIMARY KEY,
    project_id TEXT NOT NULL REFERENCES projects(id),
    pose_id TEXT NOT NULL,
    filename TEXT NOT NULL,
    mime_type TEXT NOT NULL,
    created_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_gallery_items_project ON gallery_items(project_id);
"""

_UPLOAD_ID = re.compile(r"[a-z]+_[0-9a-f]{12}")


def _now() -> datetime:
    return datetime.now(timezone.utc)


class GalleryStore:
    """
    Durable record of projects (one per batch) and their generated images.

    Appending an item and bumping its project's count/thumbnail happen in one
    write transaction, so concurrent completions of the same batch serialize.
    """

    def __init__(self, db_path: str | Path = DB_PATH, results_dir: str | Path = RESULTS_DIR):
        self.db_path = Path(db_path)
        self.results_dir = Path(results_dir)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.results_dir.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        try:
            conn.executescript(_SCHEMA)
        finally:
            conn.close()

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = sqlite3.connect(str(self.db_path), timeout=30, isolation_level=None)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("BEGIN IMMEDIATE")
            yield conn
            conn.execute("COMMIT")
        except Exception:
            conn.execute("ROLLBACK")
            raise
        finally:
            conn.close()

    # --- projects ---

    def create_project(self, requested_count: int) -> Project:
        project = Project(id=uuid.uuid4().hex, created_at=_now(), requested_count=requested_count)
        self.save_project(project)
        return project

    def save_project(self, project: Project) -> None:
        with self._transaction() as conn:
            conn.execute(
                """
                INSERT INTO projects (id, created_at, requested_count, item_count, thumbnail)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    requested_count = excluded.requested_count,
                    item_count = excluded.item_count,
                    thumbnail = excluded.thumbnail
                """,
                (
                    project.id,
                    project.created_at.isoformat(),
                    project.requested_count,
                    project.item_count,
                    project.thumbnail,
                ),
            )

    def get_project(self, project_id: str) -> Project | None:
        with self._transaction() as conn:
            row = conn.execute("SELECT * FROM projects WHERE id = ?", (project_id,)).fetchone()
        return Project(**dict(row)) if row else None

    def list_projects(self) -> list[Project]:
        with self._transaction() as conn:
            rows = conn.execute("SELECT * FROM projects ORDER BY created_at DESC, rowid DESC").fetchall()
        return [Project(**dict(row)) for row in rows]

    def delete_project(self, project_id: str) -> None:
        """Delete a project together with all of its items and files."""
        with self._transaction() as conn:
            rows = conn.execute(
                "SELECT filename FROM gallery_items WHERE project_id = ?", (project_id,)
            ).fetchall()
            conn.execute("DELETE FROM gallery_items WHERE project_id = ?", (project_id,))
            conn.execute("DELETE FROM projects WHERE id = ?", (project_id,))
        for row in rows:
            (self.results_dir / row["filename"]).unlink(missing_ok=True)

    # --- gallery items ---

    def append_item(self, project_id: str, pose_id: str, image: EncodedImage) -> GalleryItem:
        """Persist a generated image and bump the owning project's count/thumbnail."""
        item_id = uuid.uuid4().hex
        filename = f"{item_id}{extension_for_mime(image.mime_type)}"
        path = self.results_dir / filename
        path.write_bytes(image.data)
        item = GalleryItem(
            id=item_id,
            project_id=project_id,
            pose_id=pose_id,
            filename=filename,
            mime_type=image.mime_type,
            created_at=_now(),
        )
        try:
            with self._transaction() as conn:
                conn.execute(
                    """
                    INSERT INTO gallery_items (id, project_id, pose_id, filename, mime_type, created_at)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (item.id, project_id, pose_id, filename, image.mime_type, item.created_at.isoformat()),
                )
                cursor = conn.execute(
                    """
                    UPDATE projects
                    SET item_count = item_count + 1, thumbnail = COALESCE(thumbnail, ?)
                    WHERE id = ? AND item_count < requested_count
                    """,
                    (filename, project_id),
                )
                if cursor.rowcount == 0:
                    raise ValueError(f"Project {project_id} is missing or already complete")
        except Exception:
            path.unlink(missing_ok=True)
            raise
        return item

    def get_item(self, item_id: str) -> GalleryItem | None:
        with self._transaction() as conn:
            row = conn.execute("SELECT * FROM gallery_items WHERE id = ?", (item_id,)).fetchone()
        return GalleryItem(**dict(row)) if row else None

    def list_items(self, project_id: str | None = None) -> list[GalleryItem]:
        query = "SELECT * FROM gallery_items"
        params: tuple = ()
        if project_id is not None:
            query += " WHERE project_id = ?"
            params = (project_id,)
        query += " ORDER BY created_at DESC, rowid DESC"
        with self._transaction() as conn:
            rows = conn.execute(query, params).fetchall()
        return [GalleryItem(**dict(row)) for row in rows]

    def read_image(self, item: GalleryItem) -> EncodedImage:
        return EncodedImage(mime_type=item.mime_type, data=(self.results_dir / item.filename).read_bytes())

    def delete_item(self, item_id: str) -> bool:
        """Delete one item; the project goes with its last item. False if not found."""
        with self._transaction() as conn:
            item = conn.execute("SELECT * FROM gallery_items WHERE id = ?", (item_id,)).fetchone()
            if item is None:
                return False
            conn.execute("DELETE FROM gallery_items WHERE id = ?", (item_id,))
            project = conn.execute("SELECT * FROM projects WHERE id = ?", (item["project_id"],)).fetchone()
            if project is not None:
                if project["item_count"] <= 1:
                    conn.execute("DELETE FROM projects WHERE id = ?", (project["id"],))
                else:
                    thumbnail = project["thumbnail"]
                    if thumbnail == item["filename"]:
                        newest = conn.execute(
                            """
                            SELECT filename FROM gallery_items WHERE project_id = ?
                            ORDER BY created_at DESC, rowid DESC LIMIT 1
                            """,
                            (project["id"],),
                        ).fetchone()
                        thumbnail = newest["filename"] if newest else None
                    conn.execute(
                        "UPDATE projects SET item_count = item_count - 1, thumbnail = ? WHERE id = ?",
                        (thumbnail, project["id"]),
                    )
        (self.results_dir / item["filename"]).unlink(missing_ok=True)
        return True

    def delete_items(self, item_ids: list[str]) -> int:
        return sum(1 for item_id in item_ids if self.delete_item(item_id))


# --- uploads ---


def save_upload(upload_type: str, image: EncodedImage, uploads_dir: str | Path = UPLOADS_DIR) -> str:
    """Store a normalized upload and return its id."""
    if upload_type not in VALID_UPLOAD_TYPES:
        raise ValueError(f"Invalid upload_type: {upload_type}. Must be one of {VALID_UPLOAD_TYPES}")
    directory = Path(uploads_dir)
    directory.mkdir(parents=True, exist_ok=True)
    upload_id = f"{upload_type}_{uuid.uuid4().hex[:12]}"
    (directory / f"{upload_id}{extension_for_mime(image.mime_type)}").write_bytes(image.data)
    return upload_id


def load_upload(upload_id: str, uploads_dir: str | Path = UPLOADS_DIR) -> EncodedImage | None:
    if not _UPLOAD_ID.fullmatch(upload_id):
        return None
    for filepath in Path(uploads_dir).glob(f"{upload_id}.*"):
        mime_type = mime_for_filename(filepath.name)
        if mime_type:
            return EncodedImage(mime_type=mime_type, data=filepath.read_bytes())
    return None


def upload_kind(upload_id: str) -> str:
    return upload_id.split("_", 1)[0]
