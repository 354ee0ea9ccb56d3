"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from wheel_of_life.api import router as api_router

app = FastAPI(
    title="Wheel of Life Assessment",
    description="Scores Wheel of Life self-assessments and emails the results",
    version="0.1.0",
)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "ok"}, status_code=200)


# Include API router
app.include_router(api_router, prefix="/api", tags=["api"])
