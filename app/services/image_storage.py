# app/services/image_storage.py
import logging
import os
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile

from app.config import settings
from app.core.exceptions import ValidationException

logger = logging.getLogger(__name__)

PUBLIC_PREFIX = "/uploads"

class LocalImageStorage:
    def __init__(self, upload_dir: Optional[str] = None, max_size_bytes: Optional[int] = None):
        self.upload_dir = Path(upload_dir or settings.UPLOAD_DIR)
        self.max_size_bytes = max_size_bytes or settings.max_upload_bytes

    def _ensure_dir(self) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)

    async def save_image(self, file: UploadFile) -> str:
        """Valida y guarda la imagen en disco. Retorna la URL pública /uploads/<archivo>."""
        # Validar tipo de archivo
        content_type = file.content_type or ""
        if not content_type.startswith("image/"):
            raise ValidationException("Only image files are allowed")

        # Validar tamaño
        # Nunca leer más de un byte por encima del límite
        content = await file.read(self.max_size_bytes + 1)
        if len(content) > self.max_size_bytes:
            raise ValidationException(
                f"Image too large (max {self.max_size_bytes // (1024 * 1024)}MB)"
            )

        # Generar nombre único, conservando la extensión si la hay
        filename = file.filename or ""
        ext = filename.rsplit(".", 1)[1].lower() if "." in filename else ""
        unique_filename = f"{uuid.uuid4().hex}.{ext}" if ext else uuid.uuid4().hex

        self._ensure_dir()
        with open(self.upload_dir / unique_filename, "wb") as buffer:
            buffer.write(content)

        logger.info(f"Imagen guardada: {unique_filename} ({len(content)} bytes)")
        return f"{PUBLIC_PREFIX}/{unique_filename}"

    def discard(self, public_url: str) -> None:
        """Borra una imagen ya guardada (compensación si falla la escritura de la fila)."""
        path = self.resolve(public_url[len(PUBLIC_PREFIX) + 1:])
        if path is not None and path.is_file():
            os.remove(path)
            logger.warning(f"Imagen descartada: {path.name}")

    def resolve(self, relative_path: str) -> Optional[Path]:
        """
        Traduce una ruta relativa a un archivo dentro del directorio de uploads.
        Retorna None si la ruta intenta salir del directorio.
        """
        base = self.upload_dir.resolve()
        target = (base / relative_path).resolve()
        if target != base and base not in target.parents:
            return None
        return target

# Instancia global
image_storage = LocalImageStorage()
