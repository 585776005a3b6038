"""
Main FastAPI server module for SermonClip.

Initializes the FastAPI application, configures routes, CORS middleware and
logging on startup.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sermonclip.configs.config import config
from sermonclip.configs.logging_config import setup_logging
from sermonclip.routes.catalog_routes import router as catalog_router
from sermonclip.routes.media_routes import router as media_router
from sermonclip.routes.wizard_routes import router as wizard_router


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    setup_logging(
        config.log_level,
        enable_file_logging=config.log_file is not None,
        log_file=config.log_file or "sermonclip.log",
        component="api",
    )
    yield


app = FastAPI(title="SermonClip API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(wizard_router)
app.include_router(media_router)
app.include_router(catalog_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint that returns a welcome message"""
    return {"message": "SermonClip Backend API"}


def main() -> None:
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()
