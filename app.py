#!/usr/bin/env python3
"""
Main entry point for the link shortener service.

Concurrency: a single process serves many connections via async I/O
(FastAPI + uvicorn). Store file I/O runs in worker threads, and writes
are serialized by the service's lock. Running several processes against
the same data file is not supported: concurrent writers in different
processes race and the last one wins.

Usage:
    python app.py

Environment variables:
    DATA_FILE - Path of the JSON mapping file
    PUBLIC_DIR - Directory holding index.html and style.css
    HOST / PORT - Address to listen on
    SHORT_CODE_BYTES - Random bytes per generated code
    MAX_COLLISION_RETRIES - Retries when a generated code is taken
    STRICT_SHORT_CODES - Validate user supplied codes
    LOG_LEVEL - Logging level
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from lib.database.json_store import JSONFileLinkStore
from lib.service import LinkShortenerService
from lib.shortcode import ShortCodeGenerator
from lib.common.logging_config import setup_logging
from web_app import create_app


def build_service(config: Config, logger) -> LinkShortenerService:
    """Wire the JSON store, code generator and service from configuration."""
    store = JSONFileLinkStore(path=config.data_file, logger=logger)
    generator = ShortCodeGenerator(default_bytes=config.short_code_bytes)
    return LinkShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger,
        strict_short_codes=config.strict_short_codes,
        max_collision_retries=config.max_collision_retries,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger
    service = app.state.service

    logger.info("Starting link shortener service...")
    logger.info(f"Using link file {service.store.path}")
    await service.store.ensure()
    logger.info("Service started successfully")

    yield

    logger.info("Shutting down link shortener service...")
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

    logger.info("Link Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    service = build_service(config, logger)
    app = create_app(
        store_instance=service.store,
        service_instance=service,
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
        logger.info(f"Server Listening at {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
