import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import db, settings
from marketplace import router as marketplace_router
from todos import router as todos_router

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Every repository call goes through this pool.
    logger.info("api_startup")
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()
        logger.info("api_shutdown")


app = FastAPI(lifespan=lifespan)

# Browsers call this API directly; answers OPTIONS preflight on every path.
cors_origins = settings.cors_origins()
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=cors_origins != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(todos_router.router, tags=["todos"])
app.include_router(marketplace_router.router, tags=["marketplace"])


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "database": "up" if await db.ping() else "down"}


@app.get("/")
def root() -> dict:
    return {"hello": settings.greeting()}
