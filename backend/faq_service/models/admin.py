# faq_service/models/admin.py
from sqlalchemy import Column, String, DateTime
from sqlalchemy.sql import func
from faq_service.database.connection import Base
from faq_service.models.faq import generate_id
from faq_service.utils.passwords import get_password_hash, verify_password

class Admin(Base):
    __tablename__ = "admins"

    id = Column(String(32), primary_key=True, default=generate_id)
    email = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # bcrypt hash, never the raw password
    refresh_token = Column(String, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def set_password(self, raw_password: str) -> None:
        self.password = get_password_hash(raw_password)

    def compare_password(self, raw_password: str) -> bool:
        return verify_password(raw_password, self.password)
