from sqlalchemy import Column, String, Integer, Text, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from app.models.base import BaseModel

class Message(BaseModel):
    __tablename__ = "messages"

    name = Column(String(100), nullable=False)
    email = Column(String(150), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    is_read = Column(Boolean, nullable=False, default=False)

    # Relaciones
    replies = relationship("MessageReply", back_populates="parent")


class MessageReply(BaseModel):
    __tablename__ = "message_replies"

    message_id = Column(Integer, ForeignKey("messages.id"), nullable=False, index=True)
    reply = Column(Text, nullable=False)
    is_from_admin = Column(Boolean, nullable=False, default=True)

    # Relaciones
    parent = relationship("Message", back_populates="replies")
