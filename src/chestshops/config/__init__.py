"""Configuration module."""

from chestshops.config.settings import CurrencyOption, ShopSettings, load_settings

__all__ = ["CurrencyOption", "ShopSettings", "load_settings"]
