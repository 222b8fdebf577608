"""Схемы для клиентов."""

from .base import ClientSchema, ClientTypeSchema, PhoneSchema, SellerSchema
from .requests import ClientCreateSchema, ClientUpdateSchema
from .responses import ClientCollectionResponseSchema, ClientResponseSchema

__all__ = [
    # Base
    "ClientSchema",
    "ClientTypeSchema",
    "PhoneSchema",
    "SellerSchema",
    # Requests
    "ClientCreateSchema",
    "ClientUpdateSchema",
    # Responses
    "ClientResponseSchema",
    "ClientCollectionResponseSchema",
]
