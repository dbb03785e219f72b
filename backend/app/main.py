# app/main.py
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.core.db import init_db, close_db
from app.core.bootstrap import check_database
from app.core.errors import register_exception_handlers

from app.api.routers import auth, users, health

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_exception_handlers(app)

@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.db_generate_schemas)
    await check_database()

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# REST
app.include_router(auth.router, prefix="/api")
app.include_router(users.router, prefix="/api")
app.include_router(health.router, prefix="/api")

# Landing pages, only when the directories are deployed alongside the app
for mount_path, directory in (("/static", settings.static_dir), ("/templates", settings.templates_dir)):
    if Path(directory).is_dir():
        app.mount(mount_path, StaticFiles(directory=directory, html=True), name=mount_path.strip("/"))
    else:
        logger.info("[static] %s not found, %s not mounted", directory, mount_path)

@app.get("/", include_in_schema=False)
async def root():
    return RedirectResponse(url="/templates/")
