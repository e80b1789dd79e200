"""Tests for shop display entities."""

import pytest

from chestshops import BlockPos
from chestshops.components import (
    EntityUUID,
    Intangible,
    ItemDisplay,
    PreventPickup,
    Transform,
)
from chestshops.core.container import add_items
from chestshops.core.shop import Listing
from chestshops.world.display import display_item_for

SHOP_POS = BlockPos(0, 64, 0)
IRON = "Ingredient_Bar_Iron"
COPPER = "Ingredient_Bar_Copper"


def displays(world):
    found = world.query(ItemDisplay, Transform)
    return [(display.item_id, transform) for _, (display, transform) in found]


def test_display_item_prefers_configured_listing(shop):
    add_items(shop.inventory, "Rock", 1)
    assert display_item_for(shop) == "Rock"

    shop.set_listing(Listing(item_id=IRON))
    assert display_item_for(shop) == IRON

    shop.set_listing(Listing(item_id=COPPER, currency_item_id=IRON, buy_price=1))
    assert display_item_for(shop) == COPPER


def test_display_item_none_for_empty_unconfigured_shop(shop):
    assert display_item_for(shop) is None


def test_create_spawns_floating_item_above_shop(world, iron_shop, settings):
    entity = world.display.create_or_update(iron_shop, SHOP_POS)

    assert entity is not None
    assert [item for item, _ in displays(world)] == [IRON]
    transform = world.get(entity, Transform)
    assert (transform.x, transform.y, transform.z) == pytest.approx(
        (0.5, 64 + settings.display_height_offset, 0.5)
    )
    assert world.get(entity, PreventPickup) is not None
    assert world.get(entity, Intangible) is not None
    assert world.get(entity, EntityUUID).uuid == iron_shop.display_entity_id


def test_create_replaces_existing_display(world, iron_shop):
    first = world.display.create_or_update(iron_shop, SHOP_POS)
    first_id = iron_shop.display_entity_id

    second = world.display.create_or_update(iron_shop, SHOP_POS)

    assert not world.exists(first)
    assert world.exists(second)
    assert iron_shop.display_entity_id != first_id
    assert len(displays(world)) == 1


def test_create_with_nothing_to_show(world, shop):
    assert world.display.create_or_update(shop, SHOP_POS) is None
    assert shop.display_entity_id is None


def test_remove_clears_reference_when_entity_is_gone(world, iron_shop):
    entity = world.display.create_or_update(iron_shop, SHOP_POS)
    world.destroy(entity)

    assert world.display.remove(iron_shop) is False
    assert iron_shop.display_entity_id is None
    assert world.display.remove(iron_shop) is False


def test_cleanup_removes_nearest_floating_entity(world, iron_shop):
    world.display.create_or_update(iron_shop, SHOP_POS)
    far = world.spawn(Transform(0.5, 66.0, 2.9), PreventPickup())

    distance = world.display.cleanup_nearest(0.5, 65.0, 0.5, 3.0)

    assert distance == pytest.approx(0.5)
    assert displays(world) == []
    assert world.exists(far)


def test_cleanup_ignores_pickupable_and_distant_entities(world):
    world.spawn(Transform(0.0, 64.0, 0.0))
    world.spawn(Transform(10.0, 64.0, 0.0), PreventPickup())

    assert world.display.cleanup_nearest(0.0, 64.0, 0.0, 3.0) is None
