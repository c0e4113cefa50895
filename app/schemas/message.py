from pydantic import Field
from datetime import datetime
from app.schemas.base import CamelModel

class MessageBase(CamelModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)

class MessageCreate(MessageBase):
    pass

class MessageResponse(MessageBase):
    id: int
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True

class MessageReplyCreate(CamelModel):
    """El id del mensaje viene en la ruta, no en el cuerpo."""
    reply: str = Field(..., min_length=1)
    is_from_admin: bool = True

class MessageReplyResponse(CamelModel):
    id: int
    message_id: int
    reply: str
    is_from_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True
