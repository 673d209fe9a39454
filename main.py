import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from shortlink_app.config import settings
from shortlink_app.logging_config import configure_logging
from shortlink_app.database.connection import engine, Base
from shortlink_app.api.v1 import links, stats, redirect
from shortlink_app.services.exceptions import LinkError, Internal

# Import models to ensure they're registered with Base
from shortlink_app.models import Link

configure_logging(settings.log_level)
logger = logging.getLogger("shortlink_app")

# Create database tables
Base.metadata.create_all(bind=engine)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="A link shortener with click analytics built with FastAPI",
    debug=settings.debug
)


######## Error handlers

@app.exception_handler(LinkError)
async def link_error_handler(request: Request, exc: LinkError):
    if isinstance(exc, Internal):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body"}
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": Internal.default_message}
    )


@app.get("/")
def read_root():
    """Root endpoint with API information"""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "docs": "/docs",
        "redoc": "/redoc"
    }


@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "environment": settings.environment}


######## Include routers
app.include_router(links.router, prefix="/api")
app.include_router(stats.router, prefix="/api")
# Catch-all /{short_code} goes last
app.include_router(redirect.router)


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
