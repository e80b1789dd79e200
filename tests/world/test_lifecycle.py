"""Tests for shop creation and removal.

Critical Invariants:
- The chest's Container object moves between block states untouched
- remove_shop never raises and always clears the display reference
"""

from uuid import uuid4

import pytest

from chestshops import BlockPos
from chestshops.components import DroppedItem, ItemDisplay
from chestshops.core.block import ContainerBlock, ShopBlock, SolidBlock
from chestshops.core.container import add_items, count
from chestshops.world import NotAContainerError, create_shop, remove_shop

CHEST = "Furniture_Crude_Chest_Small"
SHOP_POS = BlockPos(0, 64, 0)
IRON = "Ingredient_Bar_Iron"


def test_create_shop_keeps_the_same_container(world, chest):
    add_items(chest, IRON, 12)
    owner_id = uuid4()

    shop = create_shop(world, SHOP_POS, owner_id, "Ava")

    state = world.block_at(SHOP_POS)
    assert isinstance(state, ShopBlock)
    assert state.block_type == CHEST
    assert shop.inventory is chest
    assert count(shop.inventory, IRON) == 12
    assert shop.owner_id == owner_id
    assert shop.listings == []
    assert shop.dirty


def test_create_shop_requires_plain_container(world, shop):
    with pytest.raises(NotAContainerError):
        create_shop(world, SHOP_POS, uuid4(), "Ava")
    world.set_block(BlockPos(5, 64, 5), SolidBlock("Rock"))
    with pytest.raises(ValueError):
        create_shop(world, BlockPos(5, 64, 5), uuid4(), "Ava")


def test_create_shop_defaults_blank_owner_name(world, chest):
    assert create_shop(world, SHOP_POS, uuid4(), "").owner_name == "Unknown"


def test_remove_shop_restores_container_and_display(world, iron_shop):
    world.display.create_or_update(iron_shop, SHOP_POS)
    inventory = iron_shop.inventory

    container = remove_shop(world, SHOP_POS)

    assert container is inventory
    assert world.block_at(SHOP_POS) == ContainerBlock(CHEST, inventory)
    assert count(container, IRON) == 10
    assert iron_shop.display_entity_id is None
    assert list(world.query(ItemDisplay)) == []
    assert list(world.query(DroppedItem)) == []


def test_remove_shop_without_shop(world, chest):
    assert remove_shop(world, SHOP_POS) is None
    assert remove_shop(world, BlockPos(9, 9, 9)) is None


def test_remove_shop_never_raises(world, iron_shop, monkeypatch):
    def broken_set_block(pos, state):
        raise RuntimeError("storage offline")

    monkeypatch.setattr(world, "set_block", broken_set_block)

    assert remove_shop(world, SHOP_POS) is None
