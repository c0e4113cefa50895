from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class Product(BaseModel):
    __tablename__ = "products"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(String(50), nullable=False)  # texto para mostrar, ej: "€2.500"
    status = Column(String(20), nullable=False, default="active")  # active, inactive
    image_url = Column(String(255))
