from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

sync_engine = create_engine(
    settings.database_sync_url, echo=False, future=True, pool_size=5, max_overflow=10
)
async_engine = create_async_engine(
    settings.database_async_url, echo=False, future=True, pool_size=5, max_overflow=10
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=sync_engine)
AsyncSessionLocal = async_sessionmaker(
    bind=async_engine, autoflush=False, expire_on_commit=False
)

Base = declarative_base()


async def get_async_db():
    async with AsyncSessionLocal() as db:
        yield db
