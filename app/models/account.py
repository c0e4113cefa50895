from sqlalchemy import Column, String, Integer
from app.database import Base

class Account(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # hash, nunca texto plano
