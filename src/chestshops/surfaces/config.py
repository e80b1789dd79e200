"""Owner/admin configuration surface.

Holds unsaved edits (currency, prices) until "save". Removing the shop
takes two consecutive "remove" clicks; any other action disarms it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from chestshops.adapters.models import Message, MessageColor, SurfaceKind
from chestshops.core.container import first_item_id
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.items import display_name, ids_match
from chestshops.surfaces.models import ConfigEventData, ConfigView, CurrencyButton
from chestshops.world.lifecycle import remove_shop

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)

_PRICE_STEPS = {
    "buyPlus": ("buy_price", 1),
    "buyMinus": ("buy_price", -1),
    "sellPlus": ("sell_price", 1),
    "sellMinus": ("sell_price", -1),
}


class ConfigPage:
    """Management page for a shop's slot-0 listing.

    Args:
        world: World holding the shop.
        pos: Shop block position.
        player: Managing player entity.

    Raises:
        ValueError: If the player entity has no PlayerInfo.
    """

    kind = SurfaceKind.CONFIG

    def __init__(self, world: World, pos: BlockPos, player: EntityId) -> None:
        player_id = world.player_uuid(player)
        if player_id is None:
            raise ValueError(f"Entity {player} is not a player")
        self.world = world
        self.pos = pos
        self.player = player
        self.player_id = player_id
        self.message = ""
        self.confirm_remove = False
        self.closed = False

        self.selected_currency: str | None = None
        self.buy_price = 0
        self.sell_price = 0
        shop = world.shop_at(pos)
        listing = shop.get_listing(0) if shop is not None else None
        if listing is not None:
            self.selected_currency = listing.currency_item_id
            self.buy_price = listing.buy_price
            self.sell_price = listing.sell_price
        if not self.selected_currency:
            self.selected_currency = world.settings.default_currency

    def view(self) -> ConfigView:
        settings = self.world.settings
        shop = self.world.shop_at(self.pos)
        if shop is None:
            return ConfigView(
                title="Shop Not Found",
                item_text="Error: Shop no longer exists",
                currencies=(),
                hand_text="",
                buy_price=self.buy_price,
                sell_price=self.sell_price,
                remove_text="Remove Shop",
                message=self.message,
            )

        listing = shop.get_listing(0)
        if listing is not None and listing.item_id:
            item_text = f"Selling: {display_name(listing.item_id)}"
        else:
            item_text = "Item: Not configured (add items to chest)"

        buttons = tuple(
            CurrencyButton(
                index=index,
                label=option.display_name,
                selected=ids_match(option.item_id, self.selected_currency),
            )
            for index, option in enumerate(settings.currencies)
        )

        held = self._held_item_id()
        if held is None:
            hand_text = "Hold item to use as currency"
        elif ids_match(held, self.selected_currency):
            hand_text = f"> {settings.currency_display_name(held)} <"
        else:
            hand_text = f"Use: {settings.currency_display_name(held)}"

        return ConfigView(
            title="Configure Your Shop",
            item_text=item_text,
            currencies=buttons,
            hand_text=hand_text,
            buy_price=self.buy_price,
            sell_price=self.sell_price,
            remove_text="CONFIRM DELETE" if self.confirm_remove else "Remove Shop",
            message=self.message,
        )

    def handle(self, data: ConfigEventData | Mapping[str, Any]) -> None:
        """Apply one client event.

        Args:
            data: Event payload or parsed ConfigEventData.
        """
        event = data if isinstance(data, ConfigEventData) else ConfigEventData.model_validate(data)
        action = event.action
        if not action:
            return

        if action.startswith("currency:"):
            self._select_currency(action.removeprefix("currency:"))
        elif action == "currencyFromHand":
            self._currency_from_hand()
        elif action in _PRICE_STEPS:
            self._step_price(action)
        elif action == "save":
            self.confirm_remove = False
            self._save()
            return
        elif action == "remove":
            self._remove()
            return
        elif action == "close":
            self.close()
            return
        else:
            logger.debug("Ignoring unknown config action %r", action)
            return

        self.confirm_remove = False
        self._refresh()

    def close(self) -> None:
        self.closed = True
        self.world.ui.close_surface(self.player_id)

    def _refresh(self) -> None:
        self.world.ui.refresh(self)

    def _held_item_id(self) -> str | None:
        inventory = self.world.inventory_of(self.player)
        if inventory is None:
            return None
        held = inventory.held_item()
        return held.item_id if held is not None else None

    def _select_currency(self, raw_index: str) -> None:
        currencies = self.world.settings.currencies
        try:
            index = int(raw_index)
        except ValueError:
            return
        if 0 <= index < len(currencies):
            self.selected_currency = currencies[index].item_id
            self.message = f"Currency: {currencies[index].display_name}"

    def _currency_from_hand(self) -> None:
        held = self._held_item_id()
        if held is None:
            self.message = "Hold an item to use as currency!"
            return
        self.selected_currency = held
        self.message = f"Currency: {self.world.settings.currency_display_name(held)}"

    def _step_price(self, action: str) -> None:
        field_name, direction = _PRICE_STEPS[action]
        step = self.world.settings.price_increment * direction
        setattr(self, field_name, max(0, getattr(self, field_name) + step))

    def _save(self) -> None:
        shop = self.world.shop_at(self.pos)
        if shop is None:
            self.message = "Shop no longer exists!"
            self._refresh()
            return

        listing = shop.get_or_create_listing(0)
        item_id = listing.item_id or first_item_id(shop.inventory)
        if not item_id:
            self.message = "Add items to chest first!"
            self._refresh()
            return
        if self.buy_price <= 0 and self.sell_price <= 0:
            self.message = "Set at least one price!"
            self._refresh()
            return

        shop.set_listing(
            listing.with_changes(
                item_id=item_id,
                currency_item_id=self.selected_currency,
                buy_price=self.buy_price,
                sell_price=self.sell_price,
            )
        )
        self.world.display.create_or_update(shop, self.pos)
        logger.info(
            "Shop at %s configured: %s buy=%d sell=%d %s",
            self.pos,
            item_id,
            self.buy_price,
            self.sell_price,
            self.selected_currency,
        )

        settings = self.world.settings
        currency_name = settings.currency_display_name(self.selected_currency)
        self._tell(Message("Shop is now open for business!", MessageColor.GREEN, bold=True))
        self._tell(Message(f"Selling: {settings.currency_display_name(item_id)}"))
        if self.buy_price > 0:
            self._tell(Message(f"Buy price: {self.buy_price} {currency_name}", MessageColor.GREEN))
        if self.sell_price > 0:
            self._tell(Message(f"Sell price: {self.sell_price} {currency_name}", MessageColor.GOLD))
        self.close()

    def _remove(self) -> None:
        if not self.confirm_remove:
            self.confirm_remove = True
            self.message = "Click again to confirm!"
            self._refresh()
            return

        self.confirm_remove = False
        if self.world.shop_at(self.pos) is None:
            self.message = "Shop no longer exists!"
            self._refresh()
            return
        if remove_shop(self.world, self.pos) is None:
            self.message = "Error removing shop!"
            self._refresh()
            return

        self._tell(Message.success("Shop removed! Items preserved in chest."))
        self.close()

    def _tell(self, message: Message) -> None:
        self.world.ui.send_message(self.player_id, message)
