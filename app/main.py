import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import argparse
import logging

from .core.config import settings
from .core.rate_limit import RateLimitExceeded
from .api.chat import router as chat_router
from .api.health import router as health_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format=settings.LOG_FORMAT
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    # Startup
    logger.info(f"Starting up {settings.APP_NAME}...")
    logger.info(f"Chat provider: {settings.CHAT_PROVIDER}")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME}...")

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    description="Conversational assistant backend for the Linkwave website chat widget",
    version=settings.APP_VERSION,
    lifespan=lifespan
)

# Add CORS middleware for the website widget
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "error": "Too many requests",
            "message": "Too many requests from this address. Please try again later.",
        },
    )

# Include routers
app.include_router(chat_router, prefix="/api", tags=["Chat"])
app.include_router(health_router, tags=["Health"])

# Root route
@app.get("/", tags=["Root"])
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "docs": "/docs"
    }

if __name__ == "__main__":
    # Parse command line arguments
    parser = argparse.ArgumentParser(description=settings.APP_NAME)
    parser.add_argument("--port", type=int, default=settings.PORT, help="Port to run the server on")
    parser.add_argument("--host", type=str, default=settings.HOST, help="Host to run the server on")

    args = parser.parse_args()

    # Run the application
    logger.info(f"Starting {settings.APP_NAME} on {args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)
