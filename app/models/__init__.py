from .base import BaseModel
from .v1 import ClientModel, ClientSellerModel, ClientTypeModel, PhoneModel, SellerModel, UserModel

__all__ = [
    "BaseModel",
    "UserModel",
    "ClientModel",
    "ClientTypeModel",
    "PhoneModel",
    "SellerModel",
    "ClientSellerModel",
]
