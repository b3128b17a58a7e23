# faq_service/api/routes/auth.py
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.orm import Session
from pydantic import BaseModel, Field, field_validator
from faq_service.database.connection import get_db
from faq_service.models.admin import Admin
from faq_service.utils.errors import AuthError, ValidationError
from faq_service.utils.security import (
    REFRESH_TOKEN_COOKIE,
    clear_session_cookies,
    generate_token,
    set_access_cookie,
    set_session_cookies,
    verify_token,
)

logger = logging.getLogger(__name__)

router = APIRouter()

# --- Schemas ---
class AdminCredentials(BaseModel):
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if "@" not in value:
            raise ValueError("Invalid email address")
        return value

class MessageResponse(BaseModel):
    message: str

class AccessTokenResponse(BaseModel):
    accessToken: str

# --- Helpers ---
def _start_session(admin: Admin, response: Response, db: Session) -> None:
    """Rotates the admin's refresh token and sets both session cookies."""
    refresh_token = generate_token(admin.id, "refreshToken")
    access_token = generate_token(admin.id, "accessToken")
    admin.refresh_token = refresh_token
    db.commit()
    set_session_cookies(response, access_token, refresh_token)

def _admin_for_refresh_cookie(request: Request, db: Session) -> Admin:
    refresh_token = request.cookies.get(REFRESH_TOKEN_COOKIE)
    if not refresh_token:
        raise AuthError("Invalid refresh token")

    verify_token(refresh_token, "refreshToken")
    admin = db.query(Admin).filter(Admin.refresh_token == refresh_token).first()
    if not admin:
        raise AuthError("Invalid refresh token")
    return admin

# --- Routes ---

@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(credentials: AdminCredentials, response: Response, db: Session = Depends(get_db)):
    existing = db.query(Admin).filter(Admin.email == credentials.email).first()
    if existing:
        raise ValidationError("Admin already exists")

    admin = Admin(email=credentials.email)
    admin.set_password(credentials.password)
    db.add(admin)
    db.flush()  # assigns the id used in the tokens

    _start_session(admin, response, db)
    logger.info("Registered admin %s", admin.id)
    return {"message": "Admin registered successfully"}

@router.post("/login", response_model=MessageResponse)
def login(credentials: AdminCredentials, response: Response, db: Session = Depends(get_db)):
    admin = db.query(Admin).filter(Admin.email == credentials.email).first()
    if not admin or not admin.compare_password(credentials.password):
        raise AuthError("Invalid email or password")

    _start_session(admin, response, db)
    return {"message": "Logged in successfully"}

@router.post("/refresh-token", response_model=AccessTokenResponse)
def refresh_token(request: Request, response: Response, db: Session = Depends(get_db)):
    admin = _admin_for_refresh_cookie(request, db)

    access_token = generate_token(admin.id, "accessToken")
    set_access_cookie(response, access_token)
    return {"accessToken": access_token}

@router.post("/logout", response_model=MessageResponse)
def logout(request: Request, response: Response, db: Session = Depends(get_db)):
    admin = _admin_for_refresh_cookie(request, db)

    admin.refresh_token = None
    db.commit()
    clear_session_cookies(response)
    return {"message": "Logged out successfully"}
