# app/config.py

from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./site.db"

    # Uploads
    UPLOAD_DIR: str = "uploads"
    MAX_UPLOAD_SIZE_MB: int = 5

    # Datos de demostración (proyectos y productos) al arrancar
    SEED_DEMO_DATA: bool = True

    LOG_LEVEL: str = "INFO"

    # CORS
    FRONTEND_URLS: str = "http://localhost:5173,http://localhost:3000"

    @property
    def allowed_origins(self) -> List[str]:
        """Orígenes CORS; cada origen http:// se acepta también en https://."""
        origins = []
        for url in filter(None, (u.strip() for u in self.FRONTEND_URLS.split(","))):
            origins.append(url)
            if url.startswith("http://"):
                origins.append("https://" + url[len("http://"):])
        return origins

    @property
    def max_upload_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    class Config:
        env_file = ".env"

settings = Settings()
