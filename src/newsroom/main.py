"""
Newsroom - Main Entry Point

Multilingual news API with Telegram newsletter broadcasting.
"""

import asyncio
import logging

import structlog

from newsroom.adapters.base import ChannelTransport
from newsroom.config import Settings, get_settings
from newsroom.models import close_db, init_db
from newsroom.models.base import get_session_factory
from newsroom.repositories.language_repository import LanguageRepository


def setup_logging(settings: Settings) -> None:
    """Configure structured logging."""
    log_level = getattr(logging, settings.log_level)

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Route stdlib records through the same renderer
    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.processors.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(log_level)

    # Set third-party loggers to WARNING
    for logger_name in ["telegram", "httpx", "uvicorn.access"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def ensure_data_dir(settings: Settings) -> None:
    """Ensure data directory exists."""
    data_dir = settings.data_dir
    if not data_dir.exists():
        data_dir.mkdir(parents=True, exist_ok=True)
        logging.info(f"Created data directory: {data_dir}")


async def seed_languages(settings: Settings) -> None:
    """Register the configured language codes if they are missing."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        repo = LanguageRepository(session)
        for code in settings.languages:
            await repo.get_or_create_language(code)
        await session.commit()


def build_transport(settings: Settings) -> ChannelTransport | None:
    """Create the newsletter transport if a bot token is configured."""
    if not settings.newsletter_enabled:
        return None

    # Import here to avoid loading telegram if not needed
    from newsroom.adapters.telegram.transport import TelegramTransport

    return TelegramTransport(settings.newsletter_bot_token)


async def main() -> None:
    """Main entry point."""
    settings = get_settings()

    setup_logging(settings)
    logger = logging.getLogger(__name__)

    logger.info("=" * 50)
    logger.info("  Newsroom Starting...")
    logger.info("=" * 50)
    logger.info(f"  Newsletter: {'✓ enabled' if settings.newsletter_enabled else '✗ disabled'}")
    logger.info(f"  Languages:  {', '.join(settings.languages)}")
    logger.info(f"  API:        {settings.api_host}:{settings.api_port}")
    logger.info("=" * 50)

    ensure_data_dir(settings)

    logger.info("Initializing database...")
    await init_db()
    await seed_languages(settings)

    from newsroom.api import run_api_server

    try:
        await run_api_server(build_transport(settings))
    except asyncio.CancelledError:
        logger.info("Main tasks cancelled")
    finally:
        await close_db()
        logger.info("Shutdown complete")


def cli() -> None:
    """CLI entry point."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    cli()
