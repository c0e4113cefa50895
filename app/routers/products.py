import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, UploadFile, File, Form
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.core import parse_form
from app.core.exceptions import NotFoundException, InternalErrorException
from app.schemas.product import ProductCreate, ProductUpdate, ProductResponse
from app.services import product_service
from app.services.image_storage import image_storage

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[ProductResponse])
def get_products(db: Session = Depends(get_db)):
    try:
        return product_service.get_products(db)
    except SQLAlchemyError:
        logger.exception("Error al listar productos")
        raise InternalErrorException("Failed to fetch products")

@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product = product_service.get_product(db, product_id)
    except SQLAlchemyError:
        logger.exception(f"Error al obtener el producto {product_id}")
        raise InternalErrorException("Failed to fetch product")
    if not product:
        raise NotFoundException("Product not found")
    return product

@router.post("", response_model=ProductResponse)
async def create_product(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    product_data = parse_form(ProductCreate, {
        "title": title,
        "description": description,
        "price": price,
        "status": status,
        "image_url": image_url,
    }, "Invalid product data")

    stored_url = None
    if image is not None:
        stored_url = await image_storage.save_image(image)
        product_data.image_url = stored_url

    try:
        return product_service.create_product(db, product_data)
    except SQLAlchemyError:
        logger.exception("Error al crear producto")
        if stored_url:
            image_storage.discard(stored_url)
        raise InternalErrorException("Failed to create product")

@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    price: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    product_data = parse_form(ProductUpdate, {
        "title": title,
        "description": description,
        "price": price,
        "status": status,
        "image_url": image_url,
    }, "Invalid product data")

    stored_url = None
    if image is not None:
        stored_url = await image_storage.save_image(image)
        product_data.image_url = stored_url

    try:
        product = product_service.update_product(db, product_id, product_data)
    except SQLAlchemyError:
        logger.exception(f"Error al actualizar el producto {product_id}")
        if stored_url:
            image_storage.discard(stored_url)
        raise InternalErrorException("Failed to update product")

    if not product:
        if stored_url:
            image_storage.discard(stored_url)
        raise NotFoundException("Product not found")
    return product

@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    try:
        deleted = product_service.delete_product(db, product_id)
    except SQLAlchemyError:
        logger.exception(f"Error al eliminar el producto {product_id}")
        raise InternalErrorException("Failed to delete product")
    if not deleted:
        raise NotFoundException("Product not found")
    return {"message": "Product deleted successfully"}
