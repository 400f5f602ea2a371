import logging
import os
import bcrypt
from sqlmodel import Session, select

from app.models.user.user import User


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def populate_database(session: Session):
    """Popula o banco com os dados iniciais necessários."""
    populate_admin_user(session)


def populate_admin_user(session: Session):
    """Cria o usuário admin a partir do .env, se ainda não existir."""
    admin_username = os.getenv("ADMIN_USERNAME")
    admin_password = os.getenv("ADMIN_PASSWORD")
    if not admin_username or not admin_password:
        logging.info("BANCO DE DADOS >>> ADMIN_USERNAME/ADMIN_PASSWORD não definidos, admin não criado")
        return

    user = session.exec(select(User).where(User.username == admin_username)).first()
    if not user:
        user = User(
            name=admin_username,
            username=admin_username,
            password_hash=hash_password(admin_password),
            role="admin",
            is_admin=True,
            is_active=True,
        )
        session.add(user)
        session.commit()
        logging.info(f"BANCO DE DADOS >>> Usuário admin '{admin_username}' criado")
