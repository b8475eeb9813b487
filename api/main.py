"""Main FastAPI application."""

import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api import appointment_routes, chat_routes, diet_router, static_routes
from api.dependencies import build_context
from api.routes import router
from config.settings import settings
from utils.errors import HealthConnectError, StorageUnavailable
from utils.logger import setup_logger

logger = setup_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown events."""
    # Startup
    logger.info("Starting application...")
    context = build_context(settings)
    try:
        await context.database.connect()
    except StorageUnavailable as e:
        logger.critical(f"Failed to connect to MongoDB: {e}")
        sys.exit(1)

    if not settings.email_user or not settings.email_pass:
        logger.warning("EMAIL_USER/EMAIL_PASS not set; email delivery will fail")
    if not settings.openai_api_key:
        logger.warning("OPENAI_API_KEY not set; chat fallback will answer with an apology")

    app.state.context = context
    logger.info("Application started successfully")
    
    yield
    
    # Shutdown
    logger.info("Shutting down application...")
    context.database.close()
    logger.info("Application shut down")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="HealthConnect forms, chatbot and frontend server",
    lifespan=lifespan
)

logger.info(f"CORS configured with origins: {settings.cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.exception_handler(HealthConnectError)
async def healthconnect_error_handler(request: Request, exc: HealthConnectError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder({"success": False, "message": "Invalid request", "errors": exc.errors()}),
    )


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": settings.app_name
    }


# Include API routes; the frontend catch-all goes last
app.include_router(chat_routes.router)
app.include_router(router)
app.include_router(diet_router.router)
app.include_router(appointment_routes.router)
app.include_router(static_routes.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
