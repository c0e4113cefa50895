# app/services/bootstrap.py
import logging
import threading
from sqlalchemy.orm import Session

from app.models.project import Project
from app.models.product import Product
from app.services import site_config_service

logger = logging.getLogger(__name__)

DEMO_PROJECTS = [
    {
        "title": "Modern Kantoorgebouw Amsterdam",
        "description": "Ontwerp en realisatie van een modern kantoorgebouw met duurzame materialen en energy-efficient systemen.",
        "category": "architectuur",
        "status": "completed",
        "image_url": "https://images.unsplash.com/photo-1486406146926-c627a92ad1ab?w=800&h=600&fit=crop",
    },
    {
        "title": "Luxe Woonhuis Interieur",
        "description": "Complete interieurinrichting van een luxe woonhuis met moderne elementen en klassieke accenten.",
        "category": "interieur",
        "status": "completed",
        "image_url": "https://images.unsplash.com/photo-1586023492125-27b2c045efd7?w=800&h=600&fit=crop",
    },
    {
        "title": "E-commerce Platform",
        "description": "Ontwikkeling van een volledig responsive e-commerce platform met moderne technologieën.",
        "category": "web",
        "status": "progress",
        "image_url": "https://images.unsplash.com/photo-1460925895917-afdab827c52f?w=800&h=600&fit=crop",
    },
]

DEMO_PRODUCTS = [
    {
        "title": "Premium Consultancy Pakket",
        "description": "Uitgebreide consultancy diensten voor uw project van start tot finish.",
        "price": "€2.500",
        "status": "active",
        "image_url": "https://images.unsplash.com/photo-1552664730-d307ca884978?w=800&h=600&fit=crop",
    },
    {
        "title": "Design Workshop",
        "description": "Interactieve workshop over modern design principes en trends.",
        "price": "€450",
        "status": "active",
        "image_url": "https://images.unsplash.com/photo-1542744173-8e7e53415bb0?w=800&h=600&fit=crop",
    },
    {
        "title": "Digitale Strategie Audit",
        "description": "Complete audit van uw huidige digitale strategie met concrete verbetervoorstellen.",
        "price": "€1.200",
        "status": "active",
        "image_url": "https://images.unsplash.com/photo-1551288049-bebda4e38f71?w=800&h=600&fit=crop",
    },
]

_seed_lock = threading.Lock()
_seeded = False

def seed_defaults(db: Session, include_demo: bool = True) -> bool:
    """
    Inserta la configuración por defecto y, si las tablas están vacías, los
    proyectos y productos de demostración.

    Se ejecuta una sola vez por proceso: las llamadas posteriores no hacen nada.
    Retorna True si esta llamada hizo el sembrado.
    """
    global _seeded
    with _seed_lock:
        if _seeded:
            return False

        site_config_service.get_site_config(db, create_if_missing=True)

        if include_demo:
            if db.query(Project).count() == 0:
                db.add_all(Project(**data) for data in DEMO_PROJECTS)
                db.commit()
                logger.info(f"{len(DEMO_PROJECTS)} proyectos de demostración creados")

            if db.query(Product).count() == 0:
                db.add_all(Product(**data) for data in DEMO_PRODUCTS)
                db.commit()
                logger.info(f"{len(DEMO_PRODUCTS)} productos de demostración creados")

        _seeded = True
        return True
