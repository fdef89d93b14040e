import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Import models so every table is registered on Base before create_all
from . import models  # noqa: F401
from .api.schema import graphql_app
from .config import ALLOWED_ORIGINS, LOG_LEVEL
from .database import Base, engine

# Configure logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("passlib").setLevel(logging.ERROR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(
        f"🎣 FisherFans API ready on {engine.url.get_backend_name()} "
        f"({len(Base.metadata.tables)} tables)"
    )
    yield
    engine.dispose()
    logger.info("👋 FisherFans API stopped")


app = FastAPI(title="FisherFans API", version="1.0.0", lifespan=lifespan)

logger.info(f"CORS allowed origins: {ALLOWED_ORIGINS}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# Routes
app.include_router(graphql_app, prefix="/graphql")


@app.get("/")
def root():
    return {"message": "FisherFans API is running", "graphql": "/graphql"}


@app.get("/health")
def health():
    return {"status": "healthy"}
