# app/services/account_service.py
"""
Acceso a datos de cuentas. Ninguna ruta expone estas operaciones:
la tabla `users` se conserva sin autenticación asociada.
"""
from typing import Optional
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.models.account import Account
from app.schemas.account import AccountCreate

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def get_account(db: Session, account_id: int) -> Optional[Account]:
    return db.query(Account).filter(Account.id == account_id).first()

def get_account_by_username(db: Session, username: str) -> Optional[Account]:
    return db.query(Account).filter(Account.username == username).first()

def create_account(db: Session, data: AccountCreate) -> Account:
    account = Account(
        username=data.username,
        password=get_password_hash(data.password),
    )
    db.add(account)
    db.commit()
    db.refresh(account)
    return account
