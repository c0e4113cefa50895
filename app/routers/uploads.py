from fastapi import APIRouter
from fastapi.responses import FileResponse

from app.core.exceptions import NotFoundException
from app.services.image_storage import image_storage

router = APIRouter()

@router.get("/{file_path:path}")
def serve_upload(file_path: str):
    """Sirve archivos subidos previamente desde el directorio de uploads."""
    path = image_storage.resolve(file_path)
    if path is None or not path.is_file():
        raise NotFoundException("File not found")
    return FileResponse(path)
