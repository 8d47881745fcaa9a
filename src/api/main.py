"""
FastAPI application entry point.

Local server for video content generation: biblical stories or prayers
with titles, description, tags, thumbnail prompt and call-to-action.

Optional API key authentication via API_AUTH_ENABLED / API_KEY.
"""

from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI

from src import __version__
from .routers import generation, history, settings
from ._studio_state import init_studio_state, shutdown_studio_state
from .dependencies.auth import verify_api_key, API_AUTH_ENABLED


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown of resources:
    - History store (saved credential and generation history)
    """
    # Startup
    init_studio_state()

    yield

    # Shutdown
    shutdown_studio_state()

# Tag metadata for Swagger UI
tags_metadata = [
    {
        "name": "generation",
        "description": "Content generation - full runs, single-field regeneration and idea enhancement",
    },
    {
        "name": "history",
        "description": "Generation history - list, load and delete recorded runs",
    },
    {
        "name": "settings",
        "description": "Settings - save or remove the Google AI Studio API key",
    },
]

app = FastAPI(
    title="Scripture Content Studio API",
    lifespan=lifespan,
    description="""
## Scripture Content Studio API

Local API server that generates YouTube-ready content packages from one idea.

### Authentication
When `API_AUTH_ENABLED=true`, all endpoints except `/health` require
an `X-API-Key` header matching the `API_KEY` environment variable.

### Features
- **Generate**: Story or prayer near a target length, plus titles, description, tags, thumbnail prompt and CTA
- **Regenerate**: Replace exactly one output, optionally with a one-off instruction
- **Enhance**: Expand a short idea into a richer paragraph
- **History**: Every successful run is recorded, newest first

### Usage
```bash
# Start server
uvicorn src.api.main:app --host 127.0.0.1 --port 8000

# Generate (with auth)
curl -X POST http://localhost:8000/generation/generate \\
  -H "Content-Type: application/json" \\
  -H "X-API-Key: your-api-key" \\
  -d '{"creation_type": "story", "main_prompt": "Davi e Golias", "character_count": 1500}'
```
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=tags_metadata,
)

# Health check - NO authentication (operational endpoint)
@app.get("/health")
async def health_check():
    """Health check endpoint. Not authenticated."""
    return {"status": "ok", "version": __version__}


# Include routers WITH authentication dependency (when enabled)
auth_dependency = [Depends(verify_api_key)] if API_AUTH_ENABLED else []

app.include_router(
    generation.router, prefix="/generation", tags=["generation"], dependencies=auth_dependency
)
app.include_router(
    history.router, prefix="/history", tags=["history"], dependencies=auth_dependency
)
app.include_router(
    settings.router, prefix="/settings", tags=["settings"], dependencies=auth_dependency
)


if __name__ == "__main__":
    import os
    import uvicorn
    from src.infra.logging_config import setup_logging

    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    uvicorn.run(app, host="127.0.0.1", port=8000)
