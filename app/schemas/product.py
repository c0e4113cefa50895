from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel

PRODUCT_STATUS_PATTERN = "^(active|inactive)$"

class ProductBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    price: str = Field(..., min_length=1, description="Precio como texto de presentación")
    status: str = Field("active", pattern=PRODUCT_STATUS_PATTERN)
    image_url: Optional[str] = None

class ProductCreate(ProductBase):
    pass

class ProductUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    price: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=PRODUCT_STATUS_PATTERN)
    image_url: Optional[str] = None

class ProductResponse(ProductBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
