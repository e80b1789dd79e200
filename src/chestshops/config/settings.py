"""Configuration settings using Pydantic Settings.

Values resolve from, in order of precedence: explicit keyword arguments
(including those read from the JSON config file), `CHESTSHOPS_*`
environment variables, a `.env` file, then the defaults below.

Usage:
    from chestshops.config import ShopSettings, load_settings

    settings = ShopSettings()                          # env + defaults
    settings = load_settings("plugins/chestshops/config.json")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from chestshops.core.items import display_name, ids_match

logger = logging.getLogger(__name__)

_config_file = TypeAdapter(dict[str, Any])


class CurrencyOption(BaseModel):
    """One entry in the config surface's currency picker."""

    item_id: str = Field(min_length=1)
    display_name: str


def _default_currencies() -> list[CurrencyOption]:
    return [
        CurrencyOption(item_id=f"Ingredient_Bar_{metal}", display_name=f"{metal} Bar")
        for metal in ("Copper", "Iron", "Silver", "Gold")
    ]


class ShopSettings(BaseSettings):  # type: ignore[misc]
    """Shop plugin configuration.

    Attributes:
        default_currency: Currency preselected for new listings.
        currencies: Currencies offered as buttons on the config surface.
        price_increment: Step for the price +/- buttons.
        shift_multiplier: Quantity multiplier when shift is held on trades.
        license_item_id: Item consumed to turn a chest into a shop.
        admin_permission: Permission node for admin mode and commands.
        cleanup_radius: Search radius for the floating-item cleanup command.
        display_height_offset: Height of the floating display above the chest.
        default_max_stack: Stack limit for items without an override.
        chest_capacity: Slot count of chests placed in the world.

    Environment Variables:
        CHESTSHOPS_DEFAULT_CURRENCY
        CHESTSHOPS_PRICE_INCREMENT
        CHESTSHOPS_LICENSE_ITEM_ID
        ... (one per field)
    """

    model_config = SettingsConfigDict(
        env_prefix="CHESTSHOPS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_currency: str = "Ingredient_Bar_Copper"
    currencies: list[CurrencyOption] = Field(default_factory=_default_currencies)
    price_increment: int = Field(default=1, ge=1)
    shift_multiplier: int = Field(default=10, ge=1)
    license_item_id: str = "Shop_License"
    admin_permission: str = "chestshops.admin"
    cleanup_radius: float = Field(default=3.0, gt=0)
    display_height_offset: float = 1.5
    default_max_stack: int = Field(default=64, ge=1)
    chest_capacity: int = Field(default=18, ge=1)

    def currency_display_name(self, item_id: str | None) -> str:
        """Configured name for a currency, else a title-cased item id."""
        for option in self.currencies:
            if ids_match(option.item_id, item_id):
                return option.display_name
        return display_name(item_id)


def load_settings(path: str | Path) -> ShopSettings:
    """Load settings from a JSON file, creating it with defaults if missing.

    Keys are field names and the top level must be a JSON object. Environment
    variables still apply to fields the file leaves out. An unreadable or
    invalid file falls back to defaults.

    Args:
        path: Location of the JSON config file.

    Returns:
        Resolved settings.
    """
    path = Path(path)
    if not path.exists():
        settings = ShopSettings()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Wrote default config to %s", path)
        return settings

    try:
        data = _config_file.validate_json(path.read_text(encoding="utf-8"))
        return ShopSettings(**data)
    except (OSError, UnicodeDecodeError, ValidationError) as exc:
        logger.warning("Failed to load config %s, using defaults: %s", path, exc)
        return ShopSettings()
