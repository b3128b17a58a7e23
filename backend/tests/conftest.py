import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from faq_service.database.connection import Base, get_db
from faq_service.main import app
from faq_service.models import Admin, FAQ, FAQStatus
from faq_service.services.cache_service import get_cache
from faq_service.services.translation_provider import get_translation_provider
from faq_service.utils.limiter import limiter
from faq_service.utils.security import generate_token
from tests.fakes import FakeCache, FakeTranslationProvider

ADMIN_EMAIL = "admin@test.com"
ADMIN_PASSWORD = "password123"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def provider():
    return FakeTranslationProvider()


@pytest.fixture
def cache():
    return FakeCache()


@pytest.fixture
def client(session_factory, provider, cache):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_translation_provider] = lambda: provider
    app.dependency_overrides[get_cache] = lambda: cache
    limiter.enabled = False

    yield TestClient(app)

    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def admin(db_session):
    admin = Admin(email=ADMIN_EMAIL)
    admin.set_password(ADMIN_PASSWORD)
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def admin_headers(admin):
    return {"Authorization": f"Bearer {generate_token(admin.id, 'accessToken')}"}


@pytest.fixture
def make_faq(db_session):
    def _make_faq(translations, status=FAQStatus.PUBLISHED, category="general", original_language="en", target_languages=None):
        faq = FAQ(
            translations=translations,
            category=category,
            original_language=original_language,
            target_languages=target_languages if target_languages is not None else list(translations),
            status=status,
        )
        db_session.add(faq)
        db_session.commit()
        db_session.refresh(faq)
        return faq

    return _make_faq
