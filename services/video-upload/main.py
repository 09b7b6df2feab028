"""FastAPI application entry point."""

from ddtrace import patch_all
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from dependencies import get_config
from routes import thumbnails_router, videos_router

patch_all()

app = FastAPI(title="Tubely Video Upload Service")
app.include_router(thumbnails_router)
app.include_router(videos_router)
app.mount(
    "/assets",
    StaticFiles(directory=get_config().thumbnails.assets_root, check_dir=False),
    name="assets",
)
