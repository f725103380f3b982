from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cache import close_redis
from config import configure_logging, settings
from database import async_engine
from routers import author, book, book_instance, home

configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_redis()
    await async_engine.dispose()


app = FastAPI(title="Library Catalog", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(home.router)
app.include_router(author.router)
app.include_router(book.router)
app.include_router(book_instance.router)
