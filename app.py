#!/usr/bin/env python3
"""
Main entry point for the short link service.

The server is async (FastAPI + uvicorn); every request is an independent unit
of work against one store instance created at startup.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - Storage location (default sqlite:short_url.db)
    BASE_URL - Base URL for short links
    PORT - Port to listen on (default 8080)
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shortlinks.codes import ShortCodeGenerator
from shortlinks.common.logging_config import setup_logging
from shortlinks.database import create_store
from shortlinks.service import ShortLinkService
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store and its table before serving; close it on shutdown."""
    config = app.state.config
    logger = app.state.logger
    
    logger.info("Starting short link service...")
    
    store = create_store(
        config.database_url,
        pool_max_size=config.db_pool_max_size,
        logger=logger,
    )
    await store.initialize()
    
    service = ShortLinkService(
        store=store,
        short_code_generator=ShortCodeGenerator(default_length=config.short_code_length),
        logger=logger,
        enable_custom_codes=config.enable_custom_codes,
    )
    
    app.state.store = store
    app.state.service = service
    
    logger.info("Service started successfully")
    
    yield
    
    logger.info("Shutting down short link service...")
    await service.close()
    logger.info("Service stopped")


def main():
    """Main entry point."""
    config = load_config()
    
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    
    logger.info("Short URL Service")
    logger.info(f"Configuration: {config.model_dump()}")
    
    app = create_app(
        store_instance=None,  # Set in lifespan
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    
    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )
    
    server = uvicorn.Server(uvicorn_config)
    
    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True
    
    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)
    
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
