from pydantic import Field
from typing import Optional
from datetime import datetime
from app.schemas.base import CamelModel

PROJECT_STATUS_PATTERN = "^(concept|progress|completed)$"

class ProjectBase(CamelModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    status: str = Field("concept", pattern=PROJECT_STATUS_PATTERN)
    image_url: Optional[str] = None

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    status: Optional[str] = Field(None, pattern=PROJECT_STATUS_PATTERN)
    image_url: Optional[str] = None

class ProjectResponse(ProjectBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True
