import argparse
import logging
import sys
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.fastmcp import FastMCP

from krea_mcp.api import health, info
from krea_mcp.core import config
from krea_mcp.mcp.server import build_server
from krea_mcp.services.krea_client import KreaGateway

logger = logging.getLogger("krea-mcp")


def configure_logging() -> None:
    # stderr only: stdout carries the protocol in stdio mode
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


def create_app(mcp: FastMCP) -> FastAPI:
    """HTTP app: health and info routes plus the streamable MCP endpoint at /mcp."""
    mcp_app = mcp.streamable_http_app()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        async with mcp.session_manager.run():
            logger.info("Krea AI MCP server started")
            yield

    app = FastAPI(title="Krea AI MCP Server", version=config.SERVICE_VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "mcp-session-id"],
    )
    app.include_router(health.router)
    app.include_router(info.router)
    app.mount("/", mcp_app)
    return app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="krea-mcp", description=config.SERVICE_DESCRIPTION)
    parser.add_argument(
        "--stdio", action="store_true", help="serve MCP over stdin/stdout instead of HTTP"
    )
    return parser.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging()

    if not config.KREA_API_KEY:
        logger.error("KREA_API_KEY environment variable is required")
        logger.error("Get your API key from https://krea.ai/settings/api")
        sys.exit(1)

    gateway = KreaGateway(config.load_gateway_settings())
    mcp = build_server(gateway)

    if args.stdio:
        logger.info("Krea AI MCP server running on stdio")
        mcp.run(transport="stdio")
        return

    import uvicorn

    logger.info(f"MCP endpoint: http://{config.HOST}:{config.PORT}/mcp")
    uvicorn.run(
        create_app(mcp),
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
