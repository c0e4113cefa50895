from app.services.image_storage import LocalImageStorage


def test_serve_uploaded_file(client, upload_dir):
    (upload_dir / "logo.png").write_bytes(b"png-data")
    response = client.get("/uploads/logo.png")
    assert response.status_code == 200
    assert response.content == b"png-data"


def test_missing_upload_returns_404(client):
    response = client.get("/uploads/bestaat-niet.png")
    assert response.status_code == 404
    assert response.json() == {"message": "File not found"}


def test_resolve_rejects_paths_outside_upload_dir(tmp_path):
    storage = LocalImageStorage(upload_dir=str(tmp_path / "uploads"))
    assert storage.resolve("../secret.txt") is None
    assert storage.resolve("sub/../ok.png") == (tmp_path / "uploads" / "ok.png").resolve()


def test_discard_removes_stored_file(tmp_path):
    storage = LocalImageStorage(upload_dir=str(tmp_path))
    (tmp_path / "abc.png").write_bytes(b"x")
    storage.discard("/uploads/abc.png")
    assert not (tmp_path / "abc.png").exists()


def test_health(client):
    assert client.get("/health").json()["status"] == "healthy"


def test_large_upload_is_never_read_in_full(client, monkeypatch):
    from starlette.datastructures import UploadFile
    from app.services.image_storage import image_storage

    read_sizes = []
    original_read = UploadFile.read

    async def recording_read(self, size=-1):
        data = await original_read(self, size)
        read_sizes.append((size, len(data)))
        return data

    monkeypatch.setattr(UploadFile, "read", recording_read)

    big = b"0" * (8 * 1024 * 1024)
    response = client.post(
        "/api/projects",
        data={"title": "Groot", "description": "d", "category": "web"},
        files={"image": ("big.png", big, "image/png")},
    )
    assert response.status_code == 400
    assert read_sizes
    assert all(size != -1 for size, _ in read_sizes)
    assert sum(length for _, length in read_sizes) <= image_storage.max_size_bytes + 1
