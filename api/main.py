"""
Transaction Dashboard API - Main Application.

FastAPI application with CORS enabled for the dashboard front end.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import __version__
from api.settings import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create FastAPI application
app = FastAPI(
    title="Transaction Dashboard API",
    description="Monthly sales transactions: paginated search, statistics and charts",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint.

    Returns the API status and version.
    """
    return {
        "status": "healthy",
        "version": __version__,
        "service": "transaction-dashboard-api"
    }


@app.get("/", tags=["Root"])
def root():
    """
    Root endpoint with API information.
    """
    return {
        "message": "Transaction Dashboard API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


# Import and include routers
from api.routers import charts, statistics, transactions

app.include_router(transactions.router, prefix="/api/v1", tags=["Transactions"])
app.include_router(statistics.router, prefix="/api/v1", tags=["Statistics"])
app.include_router(charts.router, prefix="/api/v1", tags=["Charts"])
