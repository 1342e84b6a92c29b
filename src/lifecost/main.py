import logging
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .catalog import CATALOG_SOURCE
from .routers import cities, compare, ratings, taxes, trends

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"
PORT = int(os.getenv("PORT", 8080))


def get_allowed_origins():
    """Any origin on Cloud Run; the local frontend dev servers otherwise."""
    if os.getenv("GOOGLE_CLOUD_PROJECT"):
        return ["*"]
    return [
        "http://localhost",
        "http://localhost:3000",  # Next.js dev server
    ]


app = FastAPI(
    title="LifeCost+ API",
    description="Browse, filter, rank and compare U.S. cities on cost of living and quality of life.",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET"],  # read-only API
    allow_headers=["*"],
)

for module in (cities, compare, ratings, trends, taxes):
    app.include_router(module.router)


@app.get("/")
async def read_root():
    """
    Root endpoint providing a welcome message.
    Useful for basic connectivity checks.
    """
    return {"message": "LifeCost+ API"}

@app.get("/health")
async def health_check():
    """
    Health check endpoint to ensure the API is running.
    """
    return {"status": "ok"}


@app.on_event("startup")
async def on_startup():
    logger.info("LifeCost+ API %s starting, catalog source: %s", API_VERSION, CATALOG_SOURCE)


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("LifeCost+ API shutting down")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=PORT)
