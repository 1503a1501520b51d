"""
HTTP-сервер для режима webhook: приём апдейтов Telegram и health check
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, Response
from telegram import Update
from telegram.ext import Application

from school_bot.config import config
from school_bot.database.connection import get_pool, close_pool
from school_bot.database.migrations import run_migrations

logger = logging.getLogger(__name__)


def create_web_app(application: Application) -> FastAPI:
    """FastAPI-приложение поверх Telegram Application (собранного без updater)"""

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            await get_pool()
            await run_migrations()
            logger.info("База данных подключена, миграции выполнены")

            async with application:
                await application.start()
                webhook_url = f"{config.WEBHOOK_URL}{config.webhook_path}"
                await application.bot.set_webhook(webhook_url, allowed_updates=["message"])
                logger.info(f"Webhook установлен: {config.WEBHOOK_URL}/webhook/***")

                yield

                await application.bot.delete_webhook()
                await application.stop()
        finally:
            await close_pool()
            logger.info("Соединение с БД закрыто")

    app = FastAPI(title="School Bot", lifespan=lifespan)

    @app.post(config.webhook_path)
    async def telegram_webhook(request: Request) -> Response:
        data = await request.json()
        await application.update_queue.put(Update.de_json(data, application.bot))
        return Response(status_code=200)

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/")
    async def root():
        return {"message": "School Bot is running", "status": "ok"}

    return app
