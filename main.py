"""
LLM translation service.

Run with:
    python main.py --port 9999
"""
import argparse
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import APP_NAME, APP_VERSION, DEFAULT_HOST, resolve_port
from admin import router as admin_router
from admin.config import ADMIN_CONFIG_FILE
from admin.config_store import init_config_store
from health import router as health_router
from LLM.llm_client import close_session
from logs.logging_config import setup_logging
from translation import router as translation_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the runtime configuration on startup, close the LLM session on shutdown."""
    store = init_config_store(app.state.config_file)
    if not store.is_configured():
        logger.warning("LLM is not configured. POST /admin/config to set the API URL, key and model.")

    yield

    await close_session()


def create_app(config_file: str = ADMIN_CONFIG_FILE) -> FastAPI:
    app = FastAPI(
        title=APP_NAME,
        description="LLM based translation service",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.config_file = config_file

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=3600,
    )

    app.include_router(translation_router)
    app.include_router(admin_router)
    app.include_router(health_router)
    return app


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog=APP_NAME, description="LLM based translation service")
    parser.add_argument("-p", "--port", type=int, default=None, help="Port to listen on (default: $PORT or 9999)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging()

    port = resolve_port(args.port)
    logger.info(f"Starting {APP_NAME} {APP_VERSION} on {DEFAULT_HOST}:{port}")

    uvicorn.run(create_app(), host=DEFAULT_HOST, port=port, log_config=None)


if __name__ == "__main__":
    main()
