"""News use cases."""

from .create_news import CreateNewsRequest, CreateNewsUseCase
from .delete_news import DeleteNewsRequest, DeleteNewsUseCase
from .get_news import GetNewsRequest, GetNewsUseCase
from .ingest_news import (
    IngestedArticle,
    IngestNewsRequest,
    IngestNewsResponse,
    IngestNewsUseCase,
)
from .update_news import UpdateNewsRequest, UpdateNewsUseCase

__all__ = [
    "CreateNewsRequest",
    "CreateNewsUseCase",
    "DeleteNewsRequest",
    "DeleteNewsUseCase",
    "GetNewsRequest",
    "GetNewsUseCase",
    "IngestedArticle",
    "IngestNewsRequest",
    "IngestNewsResponse",
    "IngestNewsUseCase",
    "UpdateNewsRequest",
    "UpdateNewsUseCase",
]
