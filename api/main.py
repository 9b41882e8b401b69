from contextlib import asynccontextmanager

from fastapi import FastAPI

from category_page import router as category_page_router
from core import db
from core.logging import setup_logging


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    # One DB pool per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(lifespan=lifespan)

app.include_router(category_page_router.router, tags=["pages"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
