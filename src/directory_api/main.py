"""FastAPI application entry point."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from directory_api.config import settings
from directory_api.middleware import add_request_id_middleware, register_error_handlers
from directory_api.routers import companies, representatives

app = FastAPI(
    title="Representative Directory API",
    description="Manage companies and the representatives assigned to them",
    version="0.1.0",
)

# CORS middleware to allow browser clients to call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(add_request_id_middleware)

register_error_handlers(app)

# Mount routers
app.include_router(companies.router, prefix=settings.api_prefix)
app.include_router(representatives.router, prefix=settings.api_prefix)
