# brandproxy main.py
import logging
from fastapi import FastAPI
from brandproxy.config import load_settings, read_settings
from brandproxy.routes.api_routes import router

logging.basicConfig(
    level=read_settings().log_level,  # Set LOG_LEVEL=DEBUG for more verbose output
    format="%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Brandfetch Proxy API", version="1.0.0")
app.include_router(router)


@app.on_event("startup")
async def on_startup():
    """Application startup event: resolve configuration once."""
    logger.info("Application starting up...")
    load_settings()


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Application shutting down...")


@app.get("/", summary="Health Check")
async def health_check():
    """
    Simple health check endpoint to verify the API is running.
    """
    return {"status": "ok", "message": "Brandfetch proxy is running."}
