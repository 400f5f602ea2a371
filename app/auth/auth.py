from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session, select
from datetime import datetime, timedelta, timezone
import logging
import jwt
import bcrypt

from app.configuration.settings import Configuration
from app.database.connection import get_session
from app.models.user.user import User
from app.schemas.auth.auth import Token, AuthCredentials

configuration = Configuration()

SECRET_KEY = configuration.secret_key
JWT_EXPIRATION_HOURS = configuration.jwt_expiration_hours

db_session = get_session


class AuthRouter(APIRouter):
    def __init__(self):
        super().__init__(tags=["auth"])
        self.add_api_route("/login", self.login, methods=["POST"], response_model=Token)
        self.add_api_route("/me", self.me, methods=["GET"])

    def _generate_jwt(self, user_id: int) -> str:
        expiration = datetime.now(timezone.utc) + timedelta(hours=JWT_EXPIRATION_HOURS)
        payload = {"user_id": user_id, "exp": expiration}
        return jwt.encode(payload, SECRET_KEY, algorithm="HS256")

    def decode_jwt(self, token: str) -> dict:
        try:
            return jwt.decode(token, SECRET_KEY, algorithms=["HS256"])
        except jwt.ExpiredSignatureError:
            raise HTTPException(status_code=401, detail="Token expirado")
        except jwt.InvalidTokenError:
            raise HTTPException(status_code=401, detail="Token inválido")

    def get_current_user(self, request: Request, session: Session = Depends(db_session)) -> User:
        authorization: str = request.headers.get("Authorization")
        if not authorization:
            raise HTTPException(status_code=401, detail="Acesso não autorizado")

        parts = authorization.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise HTTPException(status_code=401, detail="Formato de autenticação inválido")

        token = parts[1]
        payload = self.decode_jwt(token)
        user = session.get(User, payload["user_id"])

        if not user:
            raise HTTPException(status_code=404, detail="Usuário não encontrado")
        return user

    def login(self, credentials: AuthCredentials, session: Session = Depends(db_session)):
        user = session.exec(select(User).where(User.username == credentials.username)).first()

        if not user or not user.password_hash or not bcrypt.checkpw(credentials.password.encode(), user.password_hash.encode()):
            raise HTTPException(status_code=401, detail="Credenciais inválidas")

        if user.role not in ["employee", "admin"]:
            raise HTTPException(status_code=403, detail="Acesso restrito ao sistema de gerenciamento")

        user.last_login = datetime.now(timezone.utc)
        session.add(user)
        session.commit()

        logging.info(f"AUTH >>> Login de {user.username}")
        token = self._generate_jwt(user.id)
        return Token(token=token)

    def me(self, request: Request, session: Session = Depends(db_session)):
        user = self.get_current_user(request, session)
        return {
            "user": {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "username": user.username,
                "role": user.role,
                "is_active": user.is_active,
                "last_login": user.last_login,
                "is_admin": user.is_admin,
            }
        }
