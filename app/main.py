# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse

from app.config.settings import settings
from app.config.database import connect, disconnect
from app.core.middleware import setup_middleware, setup_exception_handlers
from app.api.router import api_router
from app.shared.schemas.common import HealthResponse
from app.core.auth.service import identity_verifier
from app.shared.services.cloudinary_service import cloudinary_service
from app.shared.services.stripe_service import stripe_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"🚀 {settings.app_name} starting...")
    logger.info(f"📍 Version: {settings.version}")
    logger.info(f"🌍 Environment: {'Development' if settings.debug else 'Production'}")
    logger.info(f"🗄️  Database: {settings.mongodb_host}/{settings.mongodb_db}")

    await connect(app)

    yield

    # Shutdown
    await disconnect(app)
    logger.info(f"🛑 {settings.app_name} shutting down...")


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.version,
    description="Parcel delivery booking backend",
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan
)

# Setup middleware
setup_middleware(app)
setup_exception_handlers(app)

# Include routers
app.include_router(api_router)


# Root endpoint
@app.get("/", response_class=PlainTextResponse)
async def root():
    return "Welcome to HurayraXpress Server!"


@app.get("/health", response_model=HealthResponse)
async def health_check():
    return HealthResponse(
        status="healthy",
        version=settings.version,
        app=settings.app_name,
        environment="production" if not settings.debug else "development",
        integrations={
            "auth": identity_verifier.configured,
            "payments": stripe_service.configured,
            "images": cloudinary_service.configured,
        }
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
