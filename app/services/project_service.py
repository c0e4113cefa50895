# app/services/project_service.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.models.project import Project
from app.schemas.project import ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)

def get_projects(db: Session) -> List[Project]:
    return db.query(Project).order_by(Project.created_at.asc(), Project.id.asc()).all()

def get_project(db: Session, project_id: int) -> Optional[Project]:
    return db.query(Project).filter(Project.id == project_id).first()

def create_project(db: Session, data: ProjectCreate) -> Project:
    project = Project(**data.model_dump())
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info(f"Proyecto creado: {project.id}")
    return project

def update_project(db: Session, project_id: int, data: ProjectUpdate) -> Optional[Project]:
    """Aplica solo los campos enviados. Devuelve None si el proyecto no existe."""
    project = get_project(db, project_id)
    if not project:
        return None

    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(project, field, value)

    db.commit()
    db.refresh(project)
    logger.info(f"Proyecto actualizado: {project_id}")
    return project

def delete_project(db: Session, project_id: int) -> bool:
    deleted = db.query(Project).filter(Project.id == project_id).delete()
    db.commit()
    if deleted:
        logger.info(f"Proyecto eliminado: {project_id}")
    return deleted > 0
