"""
Azure Citation Chat Proxy - FastAPI application forwarding chat messages to Azure OpenAI.
Grounds answers on an Azure Search index and returns them with their reference list split out.
"""
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from config import Config
from routes import chat
from services.chat_service import ChatService
from utils.errors import ChatProxyError, ConfigError
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    client = app.state.http_client
    if client is None:
        client = HTTPClientManager.get_azure_client()
    app.state.chat_service = ChatService(app.state.config, client)
    yield
    await HTTPClientManager.close_all()


async def chat_proxy_exception_handler(request: Request, exc: ChatProxyError):
    """Write the error message as a plain-text body with its status code."""
    app_logger.error(f"{type(exc).__name__} for {request.url}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=exc.status_code)


def create_app(config: Config | None = None, http_client: httpx.AsyncClient | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Loaded configuration, read from .env when omitted
        http_client: Client for upstream calls, the shared pooled client when omitted

    Returns:
        Configured FastAPI application

    Raises:
        ConfigError: If config is omitted and the .env file cannot be loaded
    """
    if config is None:
        config = Config.load()

    app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)
    app.state.config = config
    app.state.http_client = http_client

    app.add_exception_handler(ChatProxyError, chat_proxy_exception_handler)

    #root endpoint
    @app.get("/")
    async def root():
        """Root endpoint - health check."""
        return {"message": f"{Config.APP_TITLE} is running"}

    app.include_router(chat.router, tags=["chat"])

    return app


if __name__ == "__main__":
    import uvicorn

    try:
        config = Config.load()
    except ConfigError as e:
        app_logger.critical(str(e))
        sys.exit(1)

    config.validate()
    app_logger.info(f"Server started at :{Config.PORT}")
    uvicorn.run(create_app(config), host=Config.HOST, port=Config.PORT)
