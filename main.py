import os
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from config import get_settings
from db.database import init_db
from logging_config import configure_logging
from routers import health_router, settings_router

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    # Create the settings table on startup if it is missing
    init_db()
    yield


app = FastAPI(title="Settings Store", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router.router)
app.include_router(settings_router.router)

# Determine the absolute path to the console page
if getattr(sys, "frozen", False):
    # If the application is run as a bundle (PyInstaller)
    base_path = sys._MEIPASS
else:
    base_path = os.path.dirname(os.path.abspath(__file__))

frontend_dir = os.path.join(base_path, "frontend")

app.mount("/static", StaticFiles(directory=frontend_dir), name="static")


@app.get("/", include_in_schema=False)
async def serve_console():
    return FileResponse(os.path.join(frontend_dir, "index.html"))
