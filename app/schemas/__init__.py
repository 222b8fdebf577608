"""
Схемы API.
"""

# Common (из base.py)
from .base import (
    BaseRequestSchema,
    BaseResponseSchema,
    BaseSchema,
    CommonBaseSchema,
    ErrorResponseSchema,
    MessageResponseSchema,
    ValidationErrorResponseSchema,
)

# Health
from .health import (
    HealthCheckDataSchema,
    HealthCheckResponseSchema,
)

# Pagination
from .pagination import (
    PaginatedDataSchema,
    PaginatedResponseSchema,
    PaginationMetaSchema,
    PaginationParamsSchema,
)

# Auth
from .v1.auth import (
    LoginRequestSchema,
    RegisterRequestSchema,
    TokenResponseSchema,
    respond_with_token,
)

# Clients
from .v1.clients import (
    ClientCollectionResponseSchema,
    ClientCreateSchema,
    ClientResponseSchema,
    ClientSchema,
    ClientTypeSchema,
    ClientUpdateSchema,
    PhoneSchema,
    SellerSchema,
)

__all__ = [
    # Base
    "BaseRequestSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "CommonBaseSchema",
    "ErrorResponseSchema",
    "MessageResponseSchema",
    "ValidationErrorResponseSchema",
    # Health
    "HealthCheckDataSchema",
    "HealthCheckResponseSchema",
    # Pagination
    "PaginatedDataSchema",
    "PaginatedResponseSchema",
    "PaginationMetaSchema",
    "PaginationParamsSchema",
    # Auth
    "LoginRequestSchema",
    "RegisterRequestSchema",
    "TokenResponseSchema",
    "respond_with_token",
    # Clients
    "ClientCollectionResponseSchema",
    "ClientCreateSchema",
    "ClientResponseSchema",
    "ClientSchema",
    "ClientTypeSchema",
    "ClientUpdateSchema",
    "PhoneSchema",
    "SellerSchema",
]
