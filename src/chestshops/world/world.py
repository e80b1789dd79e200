"""World: central coordinator for blocks, entities, systems and shops.

Usage:
    world = World("overworld")
    world.register_systems(resolve_shop_use, protect_shop_blocks, protect_shop_surroundings)

    player = world.spawn_player(uuid4(), "Ava")
    world.place_block(player, BlockPos(0, 64, 0), "Furniture_Chest")
    world.use_block(player, BlockPos(0, 64, 0))
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar
from uuid import UUID

from chestshops.adapters import (
    ClaimChecker,
    LocalUIGateway,
    Message,
    UIGateway,
    resolve_claim_checker,
)
from chestshops.components import (
    DroppedItem,
    MovementState,
    Permissions,
    PlayerInfo,
    PlayerInventory,
    Transform,
)
from chestshops.config import ShopSettings
from chestshops.core.block import (
    BlockState,
    ContainerBlock,
    ShopBlock,
    SolidBlock,
    can_destroy,
    is_chest_type,
)
from chestshops.core.container import Container
from chestshops.core.events import (
    BlockEvent,
    BreakBlockEvent,
    DamageBlockEvent,
    PlaceBlockEvent,
    UseBlockEvent,
)
from chestshops.core.identity import BlockPos, EntityId
from chestshops.core.items import ItemCatalog, StackSizeCatalog
from chestshops.core.shop import Shop
from chestshops.core.system import SystemDescriptor
from chestshops.scheduling import EventDispatcher
from chestshops.storage import LocalStorage, ShopRecord, Storage
from chestshops.world.admin import AdminModeRegistry
from chestshops.world.display import DisplayManager
from chestshops.world.executor import WorldExecutor

logger = logging.getLogger(__name__)

ComponentT = TypeVar("ComponentT")
EventT = TypeVar("EventT", bound=BlockEvent)
T = TypeVar("T")

PLAYER_INVENTORY_SLOTS = 36


class World:
    """One block world with its shops, entities and event systems.

    Owns the storage backend, the event dispatcher and the world thread.
    Host integrations (UI, claims) are injected; local defaults are used
    when omitted.

    Args:
        name: World (dimension) name, passed to claim checks.
        storage: Block and entity storage backend.
        dispatcher: Event dispatcher holding the registered systems.
        settings: Shop configuration.
        ui: Player-facing UI gateway.
        claims: Land-claim integration; wrapped fail-open.
        catalog: Item stacking limits for containers created by this world.
    """

    def __init__(
        self,
        name: str = "default",
        storage: Storage | None = None,
        dispatcher: EventDispatcher | None = None,
        settings: ShopSettings | None = None,
        ui: UIGateway | None = None,
        claims: ClaimChecker | None = None,
        catalog: ItemCatalog | None = None,
    ):
        self.name = name
        self._storage: Storage = storage or LocalStorage()
        self._dispatcher = dispatcher or EventDispatcher()
        self.settings = settings or ShopSettings()
        self.catalog: ItemCatalog = catalog or StackSizeCatalog(
            default=self.settings.default_max_stack
        )
        self.ui: UIGateway = ui or LocalUIGateway()
        self.claims: ClaimChecker = resolve_claim_checker(claims)
        self.admin = AdminModeRegistry()
        self.display = DisplayManager(self)
        self.executor = WorldExecutor(name)

    # Entities

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity with the given components."""
        entity = self._storage.create_entity()
        seen_types: set[type] = set()
        for comp in components:
            if type(comp) in seen_types:
                warnings.warn(
                    f"spawn() received multiple components of type {type(comp).__name__}. "
                    f"Only the last one will be kept.",
                    stacklevel=2,
                )
            seen_types.add(type(comp))
            self._storage.set_component(entity, comp)
        return entity

    def destroy(self, entity: EntityId) -> None:
        self._storage.destroy_entity(entity)

    def exists(self, entity: EntityId) -> bool:
        return self._storage.entity_exists(entity)

    def get(self, entity: EntityId, component_type: type[ComponentT]) -> ComponentT | None:
        """Live component instance. Mutations apply to world state directly."""
        return self._storage.get_component(entity, component_type, copy=False)

    def set(self, entity: EntityId, component: Any) -> None:
        self._storage.set_component(entity, component)

    def query(self, *component_types: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Live components of entities having all given types."""
        return self._storage.query(*component_types, copy=False)

    # Players

    def spawn_player(
        self,
        player_id: UUID,
        name: str,
        permissions: Iterable[str] = (),
        position: tuple[float, float, float] = (0.0, 0.0, 0.0),
        inventory: Container | None = None,
    ) -> EntityId:
        """Spawn a player entity with every component the shop systems read."""
        return self.spawn(
            PlayerInfo(player_id, name),
            Permissions(frozenset(permissions)),
            MovementState(),
            PlayerInventory(inventory or Container(PLAYER_INVENTORY_SLOTS, self.catalog)),
            Transform(*position),
        )

    def player_uuid(self, player: EntityId) -> UUID | None:
        info = self.get(player, PlayerInfo)
        return info.uuid if info is not None else None

    def player_name(self, player: EntityId) -> str:
        info = self.get(player, PlayerInfo)
        return info.name if info is not None else "Unknown"

    def has_permission(self, player: EntityId, node: str) -> bool:
        permissions = self.get(player, Permissions)
        return permissions is not None and permissions.has(node)

    def is_crouching(self, player: EntityId) -> bool:
        movement = self.get(player, MovementState)
        return movement is not None and movement.crouching

    def set_crouching(self, player: EntityId, crouching: bool) -> None:
        self.set(player, MovementState(crouching))

    def inventory_of(self, player: EntityId) -> PlayerInventory | None:
        return self.get(player, PlayerInventory)

    def send_message(self, player: EntityId, message: Message | str) -> None:
        """Chat to a player entity. Entities without PlayerInfo are ignored."""
        player_id = self.player_uuid(player)
        if player_id is None:
            return
        if isinstance(message, str):
            message = Message(message)
        self.ui.send_message(player_id, message)

    # Blocks

    def new_container(self, capacity: int | None = None) -> Container:
        return Container(capacity or self.settings.chest_capacity, self.catalog)

    def block_at(self, pos: BlockPos) -> BlockState | None:
        return self._storage.get_block(pos)

    def set_block(self, pos: BlockPos, state: BlockState) -> None:
        self._storage.set_block(pos, state)

    def shop_at(self, pos: BlockPos) -> Shop | None:
        state = self._storage.get_block(pos)
        if isinstance(state, ShopBlock):
            return state.shop
        return None

    def shops(self) -> Iterator[tuple[BlockPos, Shop]]:
        for pos, state in self._storage.blocks():
            if isinstance(state, ShopBlock):
                yield pos, state.shop

    def shop_nearby(self, pos: BlockPos) -> bool:
        """Any of the 26 surrounding cells holds a shop.

        A failed lookup for one cell is logged and treated as "no shop".
        """
        for neighbor in pos.neighbors():
            try:
                if self.shop_at(neighbor) is not None:
                    return True
            except Exception:
                logger.warning("Block lookup failed at %s", neighbor, exc_info=True)
        return False

    # Systems and events

    def register_system(self, descriptor: SystemDescriptor) -> None:
        self._dispatcher.register_system(descriptor)

    def register_systems(self, *descriptors: SystemDescriptor) -> None:
        for descriptor in descriptors:
            self._dispatcher.register_system(descriptor)

    def dispatch(self, event: EventT) -> EventT:
        """Run registered systems against an event and return it."""
        return self._dispatcher.dispatch(self, event)

    def use_block(self, player: EntityId, pos: BlockPos) -> UseBlockEvent:
        """Player right-clicks a block.

        If no system cancels, container-like blocks open the host's native
        container screen.
        """
        event = self.dispatch(UseBlockEvent(player=player, target=pos))
        if event.cancelled:
            return event
        player_id = self.player_uuid(player)
        if player_id is not None and isinstance(self.block_at(pos), ContainerBlock | ShopBlock):
            self.ui.open_container(player_id, pos)
        return event

    def break_block(self, player: EntityId, pos: BlockPos) -> BreakBlockEvent:
        """Player breaks a block.

        An uncancelled break of a container spills its contents as dropped
        items. Blocks that refuse destruction stay regardless of systems.
        """
        event = self.dispatch(BreakBlockEvent(player=player, target=pos))
        if event.cancelled:
            return event

        state = self.block_at(pos)
        if state is None:
            return event
        if not can_destroy(state):
            event.cancel()
            return event

        self._storage.remove_block(pos)
        if isinstance(state, ContainerBlock):
            self._drop_contents(pos, state.container)
        return event

    def damage_block(self, player: EntityId, pos: BlockPos) -> DamageBlockEvent:
        return self.dispatch(DamageBlockEvent(player=player, target=pos))

    def place_block(self, player: EntityId, pos: BlockPos, block_type: str) -> PlaceBlockEvent:
        """Player places a block. Chest types become empty containers."""
        event = self.dispatch(PlaceBlockEvent(player=player, target=pos, block_type=block_type))
        if event.cancelled:
            return event
        if self.block_at(pos) is not None:
            event.cancel()
            return event

        if is_chest_type(block_type):
            self.set_block(pos, ContainerBlock(block_type, self.new_container()))
        else:
            self.set_block(pos, SolidBlock(block_type))
        return event

    def _drop_contents(self, pos: BlockPos, container: Container) -> None:
        x, y, z = pos.center()
        for stack in container.clear():
            self.spawn(DroppedItem(stack), Transform(x, y + 0.5, z))

    # Threading

    def execute(self, fn: Callable[..., T], *args: Any) -> T:
        """Run `fn(*args)` on this world's thread and return the result."""
        return self.executor.run(fn, *args)

    def close(self) -> None:
        self.executor.close()

    # Persistence

    def load_shop(self, pos: BlockPos, record: ShopRecord, block_type: str) -> Shop:
        """Install a persisted shop at `pos`, replacing the cell's contents.

        Raises:
            ShopRecordError: If a stored stack exceeds this world's catalog limits.
        """
        shop = record.to_shop(self.catalog)
        self.set_block(pos, ShopBlock(block_type, shop))
        return shop

    def dirty_records(self) -> list[tuple[BlockPos, ShopRecord]]:
        """Persisted records for every shop changed since its last save."""
        return [(pos, ShopRecord.from_shop(shop)) for pos, shop in self.shops() if shop.dirty]

    def mark_saved(self) -> None:
        for _, shop in self.shops():
            shop.mark_saved()
