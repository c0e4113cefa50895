import logging
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.exceptions import InternalErrorException
from app.schemas.site_config import SiteConfigResponse, SiteConfigUpdate
from app.services import site_config_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=SiteConfigResponse)
def get_site_config(db: Session = Depends(get_db)):
    """Obtiene la configuración del sitio; se crea con valores por defecto si no existe."""
    try:
        return site_config_service.get_site_config(db)
    except SQLAlchemyError:
        logger.exception("Error al obtener la configuración del sitio")
        raise InternalErrorException("Failed to fetch site configuration")

@router.put("", response_model=SiteConfigResponse)
def update_site_config(config_data: SiteConfigUpdate, db: Session = Depends(get_db)):
    try:
        return site_config_service.upsert_site_config(db, config_data)
    except SQLAlchemyError:
        logger.exception("Error al guardar la configuración del sitio")
        raise InternalErrorException("Failed to update site configuration")
