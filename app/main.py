import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from app.config.settings import settings
from app.config.database import Base, engine
from app.core.error_handlers import setup_exception_handlers
from app.core.logging_setup import setup_logging
from app.core.middleware import setup_middleware
from app.api.v1.router import api_router

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"{settings.app_name} starting - version {settings.version}")
    logger.info(f"Environment: {'Development' if settings.debug else 'Production'}")

    if settings.create_tables:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables ready")

    yield

    # Shutdown
    logger.info(f"{settings.app_name} shutting down")
    engine.dispose()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Mercado Fresh - Gestión de almacenes de productos frescos",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware and error mapping
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router)

# Root endpoint
@app.get("/")
async def root():
    return {
        "message": "Mercado Fresh API",
        "version": settings.version,
        "status": "running",
        "docs": "/docs" if settings.debug else "Disabled in production",
        "api": "/api/v1"
    }

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
