# app/services/message_service.py
import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundException
from app.models.message import Message, MessageReply
from app.schemas.message import MessageCreate, MessageReplyCreate

logger = logging.getLogger(__name__)

# Mensajes

def get_messages(db: Session) -> List[Message]:
    return db.query(Message).order_by(Message.created_at.asc(), Message.id.asc()).all()

def get_message(db: Session, message_id: int) -> Optional[Message]:
    return db.query(Message).filter(Message.id == message_id).first()

def create_message(db: Session, data: MessageCreate) -> Message:
    # is_read nunca viene del cliente
    message = Message(**data.model_dump(), is_read=False)
    db.add(message)
    db.commit()
    db.refresh(message)
    logger.info(f"Mensaje recibido: {message.id}")
    return message

def mark_message_as_read(db: Session, message_id: int) -> bool:
    updated = (
        db.query(Message)
        .filter(Message.id == message_id)
        .update({Message.is_read: True}, synchronize_session=False)
    )
    db.commit()
    return updated > 0

# Respuestas

def get_message_replies(db: Session, message_id: int) -> List[MessageReply]:
    return (
        db.query(MessageReply)
        .filter(MessageReply.message_id == message_id)
        .order_by(MessageReply.created_at.asc(), MessageReply.id.asc())
        .all()
    )

def create_message_reply(db: Session, message_id: int, data: MessageReplyCreate) -> MessageReply:
    if not get_message(db, message_id):
        raise NotFoundException("Message not found")

    reply = MessageReply(message_id=message_id, **data.model_dump())
    db.add(reply)
    db.commit()
    db.refresh(reply)
    logger.info(f"Respuesta {reply.id} creada para el mensaje {message_id}")
    return reply
