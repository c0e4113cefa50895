from pydantic import Field, field_validator
from typing import Optional
from app.schemas.base import CamelModel

class SiteConfigBase(CamelModel):
    hero_title: Optional[str] = None
    hero_description: Optional[str] = None
    about_title: Optional[str] = None
    about_description: Optional[str] = None

    # Diseño y marca
    logo_url: Optional[str] = None
    favicon_url: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    text_color: Optional[str] = None
    background_color: Optional[str] = None
    font_family: Optional[str] = None

    # Contacto
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    # Redes sociales
    facebook_url: Optional[str] = None
    twitter_url: Optional[str] = None
    instagram_url: Optional[str] = None
    linkedin_url: Optional[str] = None

    # SEO
    site_title: Optional[str] = None
    seo_description: Optional[str] = None
    seo_keywords: Optional[str] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None

class SiteConfigUpdate(SiteConfigBase):
    """
    Cuerpo de PUT /config. Todo es opcional: company_name solo es obligatorio
    cuando todavía no existe la fila de configuración.
    """
    company_name: Optional[str] = Field(None, min_length=1)

    @field_validator("company_name")
    @classmethod
    def company_name_not_null(cls, v):
        if v is None:
            raise ValueError("companyName no puede ser null")
        return v

class SiteConfigResponse(SiteConfigBase):
    id: int
    company_name: str

    class Config:
        from_attributes = True
