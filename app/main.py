# En main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import database
from app import models  # registra todas las tablas en Base.metadata
from app.config import settings
from app.core.log_config import setup_logging
from app.routers import (
    site_config,
    projects,
    products,
    messages,
    uploads,
)
from app.services.bootstrap import seed_defaults

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Tablas y datos iniciales antes de aceptar tráfico
    database.Base.metadata.create_all(bind=database.engine)
    db = database.SessionLocal()
    try:
        seed_defaults(db, include_demo=settings.SEED_DEMO_DATA)
    finally:
        db.close()
    logger.info("Aplicación iniciada")
    yield


app = FastAPI(
    title="Site CMS API",
    description="API de contenido para el sitio web: configuración, proyectos, productos y mensajes",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

# Configuración CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
    max_age=600,
)

# Todas las respuestas de error tienen la forma {"message": "..."}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Datos inválidos en {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"message": "Invalid request data"})

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error inesperado en {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

# Routers
app.include_router(site_config.router, prefix="/api/config", tags=["Configuración"])
app.include_router(projects.router, prefix="/api/projects", tags=["Proyectos"])
app.include_router(products.router, prefix="/api/products", tags=["Productos"])
app.include_router(messages.router, prefix="/api/messages", tags=["Mensajes"])
app.include_router(uploads.router, prefix="/uploads", tags=["Uploads"])

@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "service": "Site CMS API",
    }
