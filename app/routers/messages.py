import logging
from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import get_db
from app.core.exceptions import NotFoundException, InternalErrorException
from app.schemas.message import (
    MessageCreate, MessageResponse, MessageReplyCreate, MessageReplyResponse
)
from app.services import message_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("", response_model=List[MessageResponse])
def get_messages(db: Session = Depends(get_db)):
    try:
        return message_service.get_messages(db)
    except SQLAlchemyError:
        logger.exception("Error al listar mensajes")
        raise InternalErrorException("Failed to fetch messages")

@router.get("/{message_id}", response_model=MessageResponse)
def get_message(message_id: int, db: Session = Depends(get_db)):
    try:
        message = message_service.get_message(db, message_id)
    except SQLAlchemyError:
        logger.exception(f"Error al obtener el mensaje {message_id}")
        raise InternalErrorException("Failed to fetch message")
    if not message:
        raise NotFoundException("Message not found")
    return message

@router.post("", response_model=MessageResponse)
def create_message(message_data: MessageCreate, db: Session = Depends(get_db)):
    """Formulario de contacto público."""
    try:
        return message_service.create_message(db, message_data)
    except SQLAlchemyError:
        logger.exception("Error al guardar mensaje de contacto")
        raise InternalErrorException("Failed to create message")

@router.put("/{message_id}/read")
def mark_message_as_read(message_id: int, db: Session = Depends(get_db)):
    try:
        marked = message_service.mark_message_as_read(db, message_id)
    except SQLAlchemyError:
        logger.exception(f"Error al marcar como leído el mensaje {message_id}")
        raise InternalErrorException("Failed to mark message as read")
    if not marked:
        raise NotFoundException("Message not found")
    return {"message": "Message marked as read"}

# Respuestas del administrador

@router.get("/{message_id}/replies", response_model=List[MessageReplyResponse])
def get_message_replies(message_id: int, db: Session = Depends(get_db)):
    try:
        return message_service.get_message_replies(db, message_id)
    except SQLAlchemyError:
        logger.exception(f"Error al listar respuestas del mensaje {message_id}")
        raise InternalErrorException("Failed to fetch message replies")

@router.post("/{message_id}/replies", response_model=MessageReplyResponse)
def create_message_reply(
    message_id: int,
    reply_data: MessageReplyCreate,
    db: Session = Depends(get_db)
):
    try:
        return message_service.create_message_reply(db, message_id, reply_data)
    except SQLAlchemyError:
        logger.exception(f"Error al crear respuesta para el mensaje {message_id}")
        raise InternalErrorException("Failed to create message reply")
