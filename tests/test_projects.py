from datetime import datetime, timedelta

from app.models.project import Project


def _create(client, **fields):
    data = {"title": "Kantoor", "description": "Nieuw kantoor", "category": "architectuur"}
    data.update(fields)
    return client.post("/api/projects", data=data)


def test_create_project_defaults(client):
    response = _create(client)
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Kantoor"
    assert body["status"] == "concept"
    assert body["imageUrl"] is None
    assert isinstance(body["id"], int)
    assert body["createdAt"]


def test_created_ids_are_unique(client):
    ids = {_create(client, title=f"Project {i}").json()["id"] for i in range(5)}
    assert len(ids) == 5


def test_client_supplied_id_and_timestamp_are_ignored(client):
    response = _create(client, id="999", createdAt="2000-01-01T00:00:00")
    body = response.json()
    assert body["id"] != 999
    assert not body["createdAt"].startswith("2000-01-01")


def test_create_project_missing_field_returns_400(client):
    response = client.post("/api/projects", data={"title": "Sin descripción"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid project data"}
    assert client.get("/api/projects").json() == []


def test_create_project_invalid_status_returns_400(client):
    response = _create(client, status="finished")
    assert response.status_code == 400


def test_create_project_with_image(client, upload_dir, png_bytes):
    response = client.post(
        "/api/projects",
        data={"title": "Met foto", "description": "d", "category": "web"},
        files={"image": ("foto.png", png_bytes, "image/png")},
    )
    assert response.status_code == 200
    image_url = response.json()["imageUrl"]
    assert image_url.startswith("/uploads/")
    assert image_url.endswith(".png")
    assert (upload_dir / image_url.rsplit("/", 1)[1]).read_bytes() == png_bytes

    served = client.get(image_url)
    assert served.status_code == 200
    assert served.content == png_bytes


def test_non_image_upload_is_rejected(client):
    response = client.post(
        "/api/projects",
        data={"title": "Tekst", "description": "d", "category": "web"},
        files={"image": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert client.get("/api/projects").json() == []


def test_oversized_upload_is_rejected(client, upload_dir):
    before = set(upload_dir.iterdir())
    big = b"0" * (5 * 1024 * 1024 + 1)
    response = client.post(
        "/api/projects",
        data={"title": "Groot", "description": "d", "category": "web"},
        files={"image": ("big.png", big, "image/png")},
    )
    assert response.status_code == 400
    assert client.get("/api/projects").json() == []
    assert set(upload_dir.iterdir()) == before


def test_projects_are_ordered_by_creation_time(client, db_session):
    now = datetime.utcnow()
    # Insertados en orden inverso al de sus fechas
    for offset, title in [(3, "derde"), (1, "eerste"), (2, "tweede")]:
        db_session.add(Project(
            title=title, description="d", category="c",
            created_at=now + timedelta(minutes=offset),
        ))
    db_session.commit()

    titles = [p["title"] for p in client.get("/api/projects").json()]
    assert titles == ["eerste", "tweede", "derde"]


def test_get_project_by_id(client):
    created = _create(client).json()
    response = client.get(f"/api/projects/{created['id']}")
    assert response.status_code == 200
    assert response.json() == created


def test_get_missing_project_returns_404(client):
    response = client.get("/api/projects/12345")
    assert response.status_code == 404
    assert response.json() == {"message": "Project not found"}


def test_partial_update_keeps_other_fields(client):
    created = _create(client, status="progress").json()
    response = client.put(f"/api/projects/{created['id']}", data={"title": "Nieuwe titel"})
    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Nieuwe titel"
    assert body["category"] == created["category"]
    assert body["status"] == "progress"
    assert body["createdAt"] == created["createdAt"]
    assert body["id"] == created["id"]


def test_update_with_image_replaces_image_url(client, png_bytes):
    created = _create(client, imageUrl="https://example.com/a.jpg").json()
    response = client.put(
        f"/api/projects/{created['id']}",
        files={"image": ("nieuw.png", png_bytes, "image/png")},
    )
    assert response.status_code == 200
    assert response.json()["imageUrl"].startswith("/uploads/")


def test_update_missing_project_returns_404_and_discards_image(client, upload_dir, png_bytes):
    before = set(upload_dir.iterdir())
    response = client.put(
        "/api/projects/999",
        data={"title": "x"},
        files={"image": ("x.png", png_bytes, "image/png")},
    )
    assert response.status_code == 404
    assert set(upload_dir.iterdir()) == before


def test_update_invalid_status_returns_400(client):
    created = _create(client).json()
    response = client.put(f"/api/projects/{created['id']}", data={"status": "klaar"})
    assert response.status_code == 400


def test_delete_project(client):
    created = _create(client).json()
    response = client.delete(f"/api/projects/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Project deleted successfully"}
    assert client.get(f"/api/projects/{created['id']}").status_code == 404
    assert client.delete(f"/api/projects/{created['id']}").status_code == 404


def test_storage_failure_on_create_discards_image(client, upload_dir, png_bytes, monkeypatch):
    from sqlalchemy.exc import SQLAlchemyError
    from app.services import project_service

    def failing_create(db, data):
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(project_service, "create_project", failing_create)
    before = set(upload_dir.iterdir())

    response = client.post(
        "/api/projects",
        data={"title": "t", "description": "d", "category": "web"},
        files={"image": ("foto.png", png_bytes, "image/png")},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to create project"}
    assert set(upload_dir.iterdir()) == before


def test_storage_failure_on_update_discards_image(client, upload_dir, png_bytes, monkeypatch):
    from sqlalchemy.exc import SQLAlchemyError
    from app.services import project_service

    created = _create(client).json()

    def failing_update(db, project_id, data):
        raise SQLAlchemyError("database unavailable")

    monkeypatch.setattr(project_service, "update_project", failing_update)
    before = set(upload_dir.iterdir())

    response = client.put(
        f"/api/projects/{created['id']}",
        files={"image": ("foto.png", png_bytes, "image/png")},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Failed to update project"}
    assert set(upload_dir.iterdir()) == before
