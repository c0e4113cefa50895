from sqlalchemy import Column, String, Integer, Text, CheckConstraint
from app.database import Base

SINGLETON_ID = 1

class SiteConfig(Base):
    """
    Configuración global del sitio. La tabla admite como máximo una fila:
    la clave primaria está fijada a SINGLETON_ID por un CHECK.
    """
    __tablename__ = "site_config"
    __table_args__ = (
        CheckConstraint(f"id = {SINGLETON_ID}", name="ck_site_config_singleton"),
    )

    id = Column(Integer, primary_key=True, default=SINGLETON_ID)
    company_name = Column(String(200), nullable=False)
    hero_title = Column(String(255))
    hero_description = Column(Text)
    about_title = Column(String(255), default="Over Ons")
    about_description = Column(Text)

    # Diseño y marca
    logo_url = Column(String(255))
    favicon_url = Column(String(255))
    primary_color = Column(String(20), default="#2563eb")
    secondary_color = Column(String(20), default="#1e40af")
    accent_color = Column(String(20), default="#059669")
    text_color = Column(String(20), default="#1f2937")
    background_color = Column(String(20), default="#ffffff")
    font_family = Column(String(100), default="Inter")

    # Contacto
    email = Column(String(150))
    phone = Column(String(50))
    address = Column(String(255))

    # Redes sociales
    facebook_url = Column(String(255))
    twitter_url = Column(String(255))
    instagram_url = Column(String(255))
    linkedin_url = Column(String(255))

    # SEO
    site_title = Column(String(255))
    seo_description = Column(Text)
    seo_keywords = Column(Text)
    meta_description = Column(Text)
    meta_keywords = Column(Text)
