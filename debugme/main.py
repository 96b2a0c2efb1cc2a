from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .catalog import get_catalog
from .api.routes import progress, profiles, careers, tutor, catalog

# Load and validate reference data on startup
get_catalog()

app = FastAPI(
    title="DebugMe API",
    description="Learn-to-code progression, career matching & AI tutoring",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(progress.router, prefix="/api/v1/progress", tags=["Progress"])
app.include_router(profiles.router, prefix="/api/v1/profiles", tags=["Profiles"])
app.include_router(careers.router,  prefix="/api/v1/careers",  tags=["Careers"])
app.include_router(tutor.router,    prefix="/api/v1/tutor",    tags=["Tutor"])
app.include_router(catalog.router,  prefix="/api/v1/catalog",  tags=["Catalog"])


@app.get("/")
def root():
    return {
        "name": "DebugMe API",
        "version": "0.1.0",
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "progress": "/api/v1/progress",
            "profiles": "/api/v1/profiles",
            "careers":  "/api/v1/careers",
            "tutor":    "/api/v1/tutor",
            "catalog":  "/api/v1/catalog",
        },
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
