"""Модели версии v1."""

from .clients import ClientModel, ClientSellerModel, ClientTypeModel, PhoneModel, SellerModel
from .users import UserModel

__all__ = [
    "UserModel",
    "ClientModel",
    "ClientTypeModel",
    "PhoneModel",
    "SellerModel",
    "ClientSellerModel",
]
