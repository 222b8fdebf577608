from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.settings import settings

from .timing import TimingMiddleware


def setup_middlewares(app: FastAPI):
    """
    Настраивает все middleware для приложения FastAPI.

    В Starlette middleware выполняются в обратном порядке добавления:
    CORSMiddleware добавляется последним, чтобы обрабатывать запрос первым.
    """
    app.add_middleware(TimingMiddleware, slow_threshold_ms=settings.SLOW_THRESHOLD_MS)
    app.add_middleware(CORSMiddleware, **settings.cors_params)
