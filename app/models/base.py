from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from app.database import Base

class BaseModel(Base):
    __abstract__ = True
    id = Column(Integer, primary_key=True, index=True)
    # Asignado por el servidor, nunca por el cliente
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
