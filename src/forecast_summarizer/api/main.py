import argparse
import asyncio
import json
from contextlib import asynccontextmanager
from typing import Optional

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from prometheus_client import start_http_server

from ..config import Settings, get_settings
from ..context import AppContext
from ..log import setup_logging
from ..weather.errors import PipelineFailure

# === Constants ===

SERVICE_NAME = "nws-forecast-summarizer"

logger = structlog.get_logger(__name__)


# === FastAPI App Initialization ===


def create_app(context: AppContext) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_: FastAPI):
        yield
        await context.aclose()

    app = FastAPI(title="NWS Forecast Summarizer", version="0.1.0", lifespan=lifespan)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return SERVICE_NAME

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/api/v1/forecast", response_class=PlainTextResponse)
    async def forecast(address: Optional[str] = None):
        try:
            return await context.agent.get_forecast_summary(address)
        except PipelineFailure as e:
            logger.warning(
                "forecast request failed",
                address=address,
                reason=e.reason,
                cause=repr(e.__cause__),
            )
            return PlainTextResponse(e.reason, status_code=e.status_code)

    return app


# === CLI Actions ===


async def start_server(settings: Settings):
    context = AppContext(settings)
    app = create_app(context)

    start_http_server(settings.metrics_port, settings.metrics_host, registry=context.registry)
    logger.info(
        "welcome to nws-forecast-summarizer!",
        api=f"{settings.api_host}:{settings.api_port}",
        metrics=f"{settings.metrics_host}:{settings.metrics_port}",
        model=settings.ollama_model,
    )

    config = uvicorn.Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
    server = uvicorn.Server(config=config)
    await server.serve()


def config_validate(settings: Settings):
    print("Configuration loaded and verified:")
    print(json.dumps(settings.model_dump(), indent=2))


# === CLI Parser and Entrypoint ===


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="NWS forecast summarizer")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("start-server", help="Start the API and metrics servers")
    subparsers.add_parser("config-validate", help="Validate loaded config")

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    command = args.command

    # missing or malformed configuration is fatal: let ValidationError end the process
    settings = get_settings()
    setup_logging(settings.log_level)

    if command == "start-server":
        asyncio.run(start_server(settings))
    elif command == "config-validate":
        config_validate(settings)
    else:
        print("Unknown command. Use --help for usage.")


if __name__ == "__main__":
    main()
