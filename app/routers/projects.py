import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, UploadFile, File, Form
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.core import parse_form
from app.core.exceptions import NotFoundException, InternalErrorException
from app.schemas.project import ProjectCreate, ProjectUpdate, ProjectResponse
from app.services import project_service
from app.services.image_storage import image_storage

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[ProjectResponse])
def get_projects(db: Session = Depends(get_db)):
    try:
        return project_service.get_projects(db)
    except SQLAlchemyError:
        logger.exception("Error al listar proyectos")
        raise InternalErrorException("Failed to fetch projects")

@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(project_id: int, db: Session = Depends(get_db)):
    try:
        project = project_service.get_project(db, project_id)
    except SQLAlchemyError:
        logger.exception(f"Error al obtener el proyecto {project_id}")
        raise InternalErrorException("Failed to fetch project")
    if not project:
        raise NotFoundException("Project not found")
    return project

@router.post("", response_model=ProjectResponse)
async def create_project(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    """Crear proyecto (multipart), con imagen opcional en el campo `image`."""
    project_data = parse_form(ProjectCreate, {
        "title": title,
        "description": description,
        "category": category,
        "status": status,
        "image_url": image_url,
    }, "Invalid project data")

    stored_url = None
    if image is not None:
        stored_url = await image_storage.save_image(image)
        project_data.image_url = stored_url

    try:
        return project_service.create_project(db, project_data)
    except SQLAlchemyError:
        logger.exception("Error al crear proyecto")
        if stored_url:
            image_storage.discard(stored_url)
        raise InternalErrorException("Failed to create project")

@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: int,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    image_url: Optional[str] = Form(None, alias="imageUrl"),
    image: Optional[UploadFile] = File(None),
    db: Session = Depends(get_db)
):
    project_data = parse_form(ProjectUpdate, {
        "title": title,
        "description": description,
        "category": category,
        "status": status,
        "image_url": image_url,
    }, "Invalid project data")

    stored_url = None
    if image is not None:
        stored_url = await image_storage.save_image(image)
        project_data.image_url = stored_url

    try:
        project = project_service.update_project(db, project_id, project_data)
    except SQLAlchemyError:
        logger.exception(f"Error al actualizar el proyecto {project_id}")
        if stored_url:
            image_storage.discard(stored_url)
        raise InternalErrorException("Failed to update project")

    if not project:
        if stored_url:
            image_storage.discard(stored_url)
        raise NotFoundException("Project not found")
    return project

@router.delete("/{project_id}")
def delete_project(project_id: int, db: Session = Depends(get_db)):
    try:
        deleted = project_service.delete_project(db, project_id)
    except SQLAlchemyError:
        logger.exception(f"Error al eliminar el proyecto {project_id}")
        raise InternalErrorException("Failed to delete project")
    if not deleted:
        raise NotFoundException("Project not found")
    return {"message": "Project deleted successfully"}
