# faq_service/utils/security.py
from datetime import datetime, timedelta, timezone
from typing import Literal

from fastapi import Depends, Request, Response
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from faq_service.config import settings
from faq_service.database.connection import get_db
from faq_service.models.admin import Admin
from faq_service.utils.errors import AuthError

TokenType = Literal["accessToken", "refreshToken"]

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


def _secret_for(token_type: TokenType) -> str:
    if token_type == "refreshToken":
        return settings.REFRESH_TOKEN_SECRET
    return settings.ACCESS_TOKEN_SECRET


def _lifetime_for(token_type: TokenType) -> timedelta:
    if token_type == "refreshToken":
        return timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)
    return timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)


def generate_token(admin_id: str, token_type: TokenType) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "id": admin_id,
        "type": token_type,
        "iat": now,
        "exp": now + _lifetime_for(token_type),
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str, token_type: TokenType) -> dict:
    """Decodes a signed token, raising AuthError when it is invalid or expired."""
    try:
        payload = jwt.decode(token, _secret_for(token_type), algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise AuthError(f"Invalid {'refresh' if token_type == 'refreshToken' else 'access'} token") from None
    if payload.get("type") != token_type or "id" not in payload:
        raise AuthError("Invalid token payload")
    return payload


# --- Cookies ---

def set_access_cookie(response: Response, access_token: str) -> None:
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
    )


def set_session_cookies(response: Response, access_token: str, refresh_token: str) -> None:
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        refresh_token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        max_age=settings.REFRESH_TOKEN_EXPIRE_DAYS * 24 * 60 * 60,
    )
    set_access_cookie(response, access_token)


def clear_session_cookies(response: Response) -> None:
    response.delete_cookie(REFRESH_TOKEN_COOKIE, httponly=True, secure=settings.COOKIE_SECURE)
    response.delete_cookie(ACCESS_TOKEN_COOKIE, httponly=True, secure=settings.COOKIE_SECURE)


# --- Dependencies ---

def _access_token_from(request: Request) -> str | None:
    token = request.cookies.get(ACCESS_TOKEN_COOKIE)
    if token:
        return token
    # API clients may send the same token as a bearer header
    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def get_current_admin(request: Request, db: Session = Depends(get_db)) -> Admin:
    token = _access_token_from(request)
    if not token:
        raise AuthError("Access token is required")

    payload = verify_token(token, "accessToken")
    admin = db.query(Admin).filter(Admin.id == payload["id"]).first()
    if not admin:
        raise AuthError("Admin not found")
    return admin
