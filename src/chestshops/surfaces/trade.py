"""Customer trade surface."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from chestshops.adapters.models import SurfaceKind
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.items import display_name
from chestshops.core.transaction import TransactionResult, buy, sell
from chestshops.surfaces.models import TradeEventData, TradeView

if TYPE_CHECKING:
    from chestshops.world.world import World

logger = logging.getLogger(__name__)


class TradePage:
    """Buy/sell page shown to customers of one shop.

    Args:
        world: World holding the shop.
        pos: Shop block position.
        player: Customer entity.

    Raises:
        ValueError: If the player entity has no PlayerInfo.
    """

    kind = SurfaceKind.TRADE

    def __init__(self, world: World, pos: BlockPos, player: EntityId) -> None:
        player_id = world.player_uuid(player)
        if player_id is None:
            raise ValueError(f"Entity {player} is not a player")
        self.world = world
        self.pos = pos
        self.player = player
        self.player_id = player_id
        self.message = ""

    def view(self) -> TradeView:
        shop = self.world.shop_at(self.pos)
        if shop is None:
            return TradeView(
                title="Shop Not Found",
                item_name="Unknown",
                stock_text="",
                buy_text="Not for sale",
                sell_text="Not buying",
                can_buy=False,
                can_sell=False,
                message=self.message,
            )

        listing = shop.get_listing(0)
        if listing is None or not listing.is_configured():
            return TradeView(
                title=shop.display_name,
                item_name="Not Configured",
                stock_text="This shop has not been set up yet.",
                buy_text="Not for sale",
                sell_text="Not buying",
                can_buy=False,
                can_sell=False,
                message=self.message,
            )

        item_name = display_name(listing.item_id)
        currency_name = display_name(listing.currency_item_id)
        can_buy = listing.can_buy_from()
        can_sell = listing.can_sell_to()
        return TradeView(
            title=shop.display_name,
            item_name=item_name,
            stock_text=f"Item: {item_name} | Stock: {shop.stock(listing.item_id)}",
            buy_text=f"{listing.buy_price} {currency_name}" if can_buy else "Not for sale",
            sell_text=f"{listing.sell_price} {currency_name}" if can_sell else "Not buying",
            can_buy=can_buy,
            can_sell=can_sell,
            message=self.message,
        )

    def handle(self, data: TradeEventData | Mapping[str, Any]) -> TransactionResult | None:
        """Run one buy or sell from a client event.

        Args:
            data: Event payload or parsed TradeEventData.

        Returns:
            The transaction result, or None when no trade was attempted.
        """
        event = data if isinstance(data, TradeEventData) else TradeEventData.model_validate(data)
        if not event.action:
            return None
        verb, quantity = event.parse(self.world.settings.shift_multiplier)

        shop = self.world.shop_at(self.pos)
        if shop is None:
            return self._show("Shop no longer exists!")
        listing = shop.get_listing(0)
        if listing is None:
            return self._show("Shop not configured!")
        inventory = self.world.inventory_of(self.player)
        if inventory is None:
            logger.debug("Trade by %s without inventory component", self.player_id)
            return self._show("Error accessing inventory!")

        match verb:
            case "buy":
                result = buy(shop, listing, inventory.container, quantity)
            case "sell":
                result = sell(shop, listing, inventory.container, quantity)
            case _:
                return None

        self._show(result.message)
        return result

    def _show(self, message: str) -> None:
        self.message = message
        self.world.ui.refresh(self)
