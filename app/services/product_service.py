# app/services/product_service.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)

def get_products(db: Session) -> List[Product]:
    return db.query(Product).order_by(Product.created_at.asc(), Product.id.asc()).all()

def get_product(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()

def create_product(db: Session, data: ProductCreate) -> Product:
    product = Product(**data.model_dump())
    db.add(product)
    db.commit()
    db.refresh(product)
    logger.info(f"Producto creado: {product.id}")
    return product

def update_product(db: Session, product_id: int, data: ProductUpdate) -> Optional[Product]:
    product = get_product(db, product_id)
    if not product:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(product, field, value)

    db.commit()
    db.refresh(product)
    logger.info(f"Producto actualizado: {product_id}")
    return product

def delete_product(db: Session, product_id: int) -> bool:
    deleted = db.query(Product).filter(Product.id == product_id).delete()
    db.commit()
    if deleted:
        logger.info(f"Producto eliminado: {product_id}")
    return deleted > 0
