import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from graphlab.api.routes import registry
from graphlab.api.routes import router as algorithms_router
from graphlab.config import get_settings

logger = logging.getLogger("uvicorn.error")

settings = get_settings()
logging.getLogger("graphlab").setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup: log registered algorithms and available samples ---
    names = registry.list_algorithms()
    logger.info("Loaded %d graph algorithm(s): %s", len(names), names)

    samples_dir = get_settings().samples_dir
    if samples_dir.is_dir():
        samples = [p.stem for p in sorted(samples_dir.glob("*.json"))]
        logger.info("Available sample graphs: %s", samples)
    else:
        logger.warning("Samples directory does not exist: %s", samples_dir)

    yield


app = FastAPI(
    title="Graph Algorithms Lab",
    description="Classical graph algorithms over a small weighted graph, for step-by-step visualisation",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(algorithms_router)


@app.get("/")
async def root():
    return "OK"


@app.get("/health")
async def health_check():
    return {"status": "ok"}
