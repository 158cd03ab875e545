"""Record models for everything stored in the Realtime Database."""

from .catalog import Category, Dish, Price, SliderImage, WishlistItem
from .order import DriverDetails, Order
from .settings import AppSettings, DeliverySettings, ThemeSettings
from .user import Address, UserData

__all__ = [
    "Address",
    "AppSettings",
    "Category",
    "DeliverySettings",
    "Dish",
    "DriverDetails",
    "Order",
    "Price",
    "SliderImage",
    "ThemeSettings",
    "UserData",
    "WishlistItem",
]
