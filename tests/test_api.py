import time

import pytest
from fastapi.testclient import TestClient

from conftest import FakeClient, make_encoded, make_image_bytes, studio_handler
from profashion import generator
from profashion.main import app, get_gemini_client, get_store, get_uploads_dir


@pytest.fixture
def gemini():
    return FakeClient(studio_handler())


@pytest.fixture
def client(store, tmp_path, gemini):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_uploads_dir] = lambda: str(tmp_path / "uploads")
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    # Context manager keeps one event loop alive so background batches can finish
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_catalogs(client):
    poses = client.get("/catalog/poses").json()
    assert len(poses) == 28
    assert {p["category"] for p in poses} == {"A", "B"}
    assert len(client.get("/catalog/models").json()) == 20
    assert client.get("/catalog/backgrounds").status_code == 200
    assert client.get("/catalog/shot-types").status_code == 200


def test_upload_is_normalized(client):
    response = client.post(
        "/uploads",
        params={"upload_type": "garment"},
        files={"file": ("shirt.png", make_image_bytes(), "image/png")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["upload_id"].startswith("garment_")
    assert body["mime_type"] == "image/jpeg"


def test_undecodable_upload_is_rejected(client):
    response = client.post(
        "/uploads",
        params={"upload_type": "garment"},
        files={"file": ("notes.txt", b"not an image", "text/plain")},
    )
    assert response.status_code == 422


def test_invalid_upload_type(client):
    response = client.post(
        "/uploads",
        params={"upload_type": "shoes"},
        files={"file": ("shirt.png", make_image_bytes(), "image/png")},
    )
    assert response.status_code == 400


def test_validate_reports_missing_inputs(client):
    body = client.post("/validate", json={}).json()
    assert body["is_valid"] is False
    assert len(body["missing_fields"]) == 5


def test_generate_refuses_incomplete_request(client):
    response = client.post("/generate", json={"pose_ids": ["A1"]})

    assert response.status_code == 400
    assert "Upload garment photos" in response.json()["missing_fields"]


def test_generate_refuses_non_garment_upload(client):
    response = client.post(
        "/generate",
        json={
            "model": {"builtin_id": "f1"},
            "background": {"builtin_id": "s1"},
            "garment_upload_ids": ["model_0123456789ab"],
            "pose_ids": ["A1"],
            "shot_type": "full_body",
        },
    )
    assert response.status_code == 400


def test_unknown_batch_is_404(client):
    assert client.get("/batches/unknown").status_code == 404


def test_gallery_list_download_and_delete(client, store):
    project = store.create_project(2)
    first = store.append_item(project.id, "A1", make_encoded())
    second = store.append_item(project.id, "B2", make_encoded(color=(0, 0, 0)))

    items = client.get("/gallery", params={"project_id": project.id}).json()
    assert [i["id"] for i in items] == [second.id, first.id]
    assert items[0]["image_url"].endswith(second.filename)

    download = client.get(f"/gallery/{first.id}/download")
    assert download.status_code == 200
    assert download.headers["content-type"] == "image/png"
    assert "attachment" in download.headers["content-disposition"]

    assert client.delete(f"/gallery/{first.id}").status_code == 200
    assert client.delete(f"/gallery/{first.id}").status_code == 404
    assert client.get("/projects").json()[0]["item_count"] == 1

    assert client.post("/gallery/delete", json={"ids": [second.id]}).json()["deleted"] == 1
    assert store.get_project(project.id) is None


def test_delete_project(client, store):
    project = store.create_project(1)
    store.append_item(project.id, "A1", make_encoded())

    assert client.delete(f"/projects/{project.id}").status_code == 200
    assert client.delete(f"/projects/{project.id}").status_code == 404


async def _catalog_image(source):
    return make_encoded(color=(90, 90, 90))


def test_generate_runs_batch_to_completion(client, gemini, monkeypatch):
    monkeypatch.setattr(generator, "normalize", _catalog_image)
    upload = client.post(
        "/uploads",
        params={"upload_type": "garment"},
        files={"file": ("shirt.png", make_image_bytes(), "image/png")},
    ).json()

    response = client.post(
        "/generate",
        json={
            "model": {"builtin_id": "f1"},
            "background": {"builtin_id": "s1"},
            "garment_upload_ids": [upload["upload_id"]],
            "pose_ids": ["A1", "B2"],
            "shot_type": "full_body",
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "generating"
    assert [r["pose_id"] for r in body["results"]] == ["A1", "B2"]
    assert all(r["loading"] for r in body["results"])

    project_id = body["project_id"]
    for _ in range(200):
        status = client.get(f"/batches/{project_id}").json()
        if status["completed"]:
            break
        time.sleep(0.05)

    assert status["completed"]
    assert all(not r["loading"] and r["error"] is None for r in status["results"])
    assert all("/results/" in r["image_url"] for r in status["results"])
    assert len(gemini.generation_calls()) == 2

    projects = client.get("/projects").json()
    assert projects[0]["id"] == project_id
    assert projects[0]["item_count"] == 2
