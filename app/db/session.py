# app/db/session.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from urllib.parse import quote_plus

from app.core.config import settings


def build_database_url():
    if settings.DATABASE_URL:
        return settings.DATABASE_URL

    # URL-encode password to handle special characters like @ $ !
    encoded_password = quote_plus(settings.DB_PASSWORD)

    return (
        f"postgresql+psycopg2://{settings.DB_USER}:"
        f"{encoded_password}@"
        f"{settings.DB_HOST}:"
        f"{settings.DB_PORT}/"
        f"{settings.DB_NAME}"
        f"?sslmode={settings.DB_SSLMODE}"
    )


DATABASE_URL = build_database_url()

if DATABASE_URL.startswith("sqlite"):
    # one shared connection so an in-memory database outlives each session
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
    )

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
