"""
Projects API - Backend API
"""
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from projects_api import __version__
from projects_api.config import Config

# Configure logging
logging.basicConfig(
    level=Config.effective_log_level(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Projects API",
    description="In-memory CRUD API for project records",
    version=__version__
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request logging
from projects_api.middleware import configure_request_log_middleware

configure_request_log_middleware(
    app,
    enabled=Config.LOG_REQUESTS,
    methods=Config.LOG_REQUEST_METHODS,
)

# Import and include routers
from projects_api.api.projects import router as projects_router
from projects_api.storage import ProjectStoreError

app.include_router(projects_router)


@app.exception_handler(ProjectStoreError)
async def project_store_error_handler(request: Request, exc: ProjectStoreError):
    """Render store errors as {"error": message} with the matching status code."""
    logger.warning(f"[{request.method}] {request.url.path} -> {exc.status_code} {exc.message} (project {exc.project_id})")
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "projects-api"}


@app.get("/")
async def root():
    """Root endpoint with API overview."""
    return {
        "message": "Projects API",
        "version": __version__,
        "endpoints": {
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/health",
            "projects": "/projects",
            "project": "/projects/{project_id}"
        }
    }
