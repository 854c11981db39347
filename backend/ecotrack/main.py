from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from ecotrack.config import settings
from ecotrack.database import engine, Base, SessionLocal
from ecotrack.seed import seed_defaults
from ecotrack.api import auth, users, settings as settings_api, electricity, water, waste, imports


# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting application...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        seed_defaults(db)
    finally:
        db.close()

    yield
    # Shutdown
    logger.info("Shutting down application...")


app = FastAPI(
    title="EcoTrack",
    description="Track electricity, water and waste per unit against sustainability goals",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(settings_api.router, prefix="/api/settings", tags=["Settings"])
app.include_router(electricity.router, prefix="/api/electricity", tags=["Electricity"])
app.include_router(water.router, prefix="/api/water", tags=["Water"])
app.include_router(waste.router, prefix="/api/waste", tags=["Waste"])
app.include_router(imports.router, prefix="/api/import", tags=["Import"])


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.get("/")
async def root():
    return {"message": "EcoTrack API", "docs": "/docs"}
