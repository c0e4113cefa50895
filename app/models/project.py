from sqlalchemy import Column, String, Text
from app.models.base import BaseModel

class Project(BaseModel):
    __tablename__ = "projects"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default="concept")  # concept, progress, completed
    image_url = Column(String(255))
