# app/services/site_config_service.py
import logging
from typing import Optional
from sqlalchemy.orm import Session

from app.core.exceptions import ValidationException
from app.models.site_config import SiteConfig, SINGLETON_ID
from app.schemas.site_config import SiteConfigUpdate

logger = logging.getLogger(__name__)

DEFAULT_SITE_CONFIG = {
    "company_name": "Voorbeeld Bedrijf BV",
    "hero_title": "Welkom bij Voorbeeld Bedrijf BV",
    "hero_description": "Wij leveren professionele diensten en hoogwaardige producten die uw verwachtingen overtreffen.",
    "about_title": "Over Ons",
    "about_description": (
        "Met meer dan 10 jaar ervaring in de branche, zijn wij uw betrouwbare partner voor "
        "innovatieve oplossingen. Ons toegewijde team van experts werkt samen om uw visie "
        "werkelijkheid te maken en uw bedrijfsdoelen te overtreffen."
    ),
    "primary_color": "#2563eb",
    "email": "info@voorbeeldbedrijf.nl",
    "phone": "+31 20 123 4567",
    "address": "Hoofdstraat 123, 1234 AB Amsterdam",
    "meta_description": (
        "Voorbeeld Bedrijf BV - Professionele diensten en hoogwaardige producten. "
        "Meer dan 10 jaar ervaring in innovatieve oplossingen."
    ),
    "meta_keywords": "professionele diensten, hoogwaardige producten, innovatieve oplossingen, betrouwbare partner",
}

def _check_singleton(db: Session) -> None:
    count = db.query(SiteConfig).count()
    if count > 1:
        # El CHECK de la tabla lo impide; si ocurre, la base está corrupta
        raise RuntimeError(f"site_config tiene {count} filas, se esperaba como máximo 1")

def get_site_config(db: Session, create_if_missing: bool = True) -> Optional[SiteConfig]:
    """
    Devuelve la fila única de configuración. Si no existe y create_if_missing
    es True, la crea con los valores por defecto.
    """
    _check_singleton(db)
    config = db.get(SiteConfig, SINGLETON_ID)
    if config is None and create_if_missing:
        config = SiteConfig(id=SINGLETON_ID, **DEFAULT_SITE_CONFIG)
        db.add(config)
        db.commit()
        db.refresh(config)
        logger.info("Configuración del sitio creada con valores por defecto")
    return config

def upsert_site_config(db: Session, data: SiteConfigUpdate) -> SiteConfig:
    """
    Actualiza la configuración existente con los campos enviados, o la crea si
    no existe. En la creación companyName es obligatorio.
    """
    values = data.model_dump(exclude_unset=True)
    config = get_site_config(db, create_if_missing=False)

    if config is None:
        if not values.get("company_name"):
            raise ValidationException("Invalid configuration data")
        config = SiteConfig(id=SINGLETON_ID, **values)
        db.add(config)
        logger.info("Configuración del sitio creada")
    else:
        for field, value in values.items():
            setattr(config, field, value)
        logger.info(f"Configuración del sitio actualizada: {sorted(values)}")

    db.commit()
    db.refresh(config)
    return config
