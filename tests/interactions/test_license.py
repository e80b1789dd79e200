"""Tests for turning a chest into a shop with a license.

Critical Invariants:
- Checks run in a fixed order and only the first failure is reported
- A license is consumed only when a shop is created
- Chest contents carry over into the new shop
"""

from uuid import uuid4

import pytest

from chestshops import BlockPos, World
from chestshops.adapters import LocalUIGateway
from chestshops.core.block import ContainerBlock, ShopBlock, SolidBlock
from chestshops.core.container import add_items, count
from chestshops.core.items import ItemStack
from chestshops.interactions import LicenseOutcome, is_double_chest, use_license

CHEST = "Furniture_Crude_Chest_Small"
SHOP_POS = BlockPos(0, 64, 0)
LICENSE = "Shop_License"
IRON = "Ingredient_Bar_Iron"


class DenyingClaims:
    def can_create_shop(self, player_id, dimension, x, z):
        return False

    def claim_owner_name(self, dimension, x, z):
        return "Dana"


def held(world, player):
    return world.inventory_of(player).held_item()


def test_license_creates_shop(world, ui, owner, hold, chest):
    add_items(chest, IRON, 7)
    hold(owner, LICENSE, 3)

    outcome = use_license(world, owner, SHOP_POS)

    assert outcome is LicenseOutcome.CREATED
    shop = world.shop_at(SHOP_POS)
    assert shop.owner_id == world.player_uuid(owner)
    assert shop.owner_name == "Ava"
    assert shop.inventory is chest
    assert count(shop.inventory, IRON) == 7
    assert held(world, owner).quantity == 2
    assert ui.last_text(world.player_uuid(owner)) == LicenseOutcome.CREATED.message


def test_last_license_is_used_up(world, owner, hold, chest):
    hold(owner, LICENSE)
    use_license(world, owner, SHOP_POS)
    assert held(world, owner) is None


def test_license_matching_is_tolerant(world, owner, hold, chest):
    hold(owner, "hytale:shop_license")
    assert use_license(world, owner, SHOP_POS) is LicenseOutcome.CREATED


@pytest.mark.parametrize(
    "setup,target,expected",
    [
        ("none", None, LicenseOutcome.NO_TARGET),
        ("no_license", SHOP_POS, LicenseOutcome.NOT_HOLDING_LICENSE),
        ("shop", SHOP_POS, LicenseOutcome.ALREADY_SHOP),
        ("solid", SHOP_POS, LicenseOutcome.NOT_A_CONTAINER),
        ("empty", SHOP_POS, LicenseOutcome.NOT_A_CONTAINER),
        ("double", SHOP_POS, LicenseOutcome.DOUBLE_CHEST),
    ],
)
def test_rejections(world, ui, owner, hold, setup, target, expected):
    if setup != "no_license":
        hold(owner, LICENSE)
    if setup in ("no_license", "shop", "double", "none"):
        world.set_block(SHOP_POS, ContainerBlock(CHEST, world.new_container()))
    if setup == "shop":
        assert use_license(world, owner, SHOP_POS) is LicenseOutcome.CREATED
        hold(owner, LICENSE)
    if setup == "solid":
        world.set_block(SHOP_POS, SolidBlock("Rock"))
    if setup == "double":
        world.set_block(SHOP_POS.offset(dx=1), ContainerBlock(CHEST, world.new_container()))

    outcome = use_license(world, owner, target)

    assert outcome is expected
    assert ui.last_text(world.player_uuid(owner)) == expected.message
    if setup != "no_license":
        assert held(world, owner).quantity == 1
    if setup != "shop":
        assert not isinstance(world.block_at(SHOP_POS), ShopBlock)


def test_diagonal_and_vertical_chests_are_not_double(world, chest):
    world.set_block(SHOP_POS.offset(dx=1, dz=1), ContainerBlock(CHEST, world.new_container()))
    world.set_block(SHOP_POS.offset(dy=1), ContainerBlock(CHEST, world.new_container()))
    assert not is_double_chest(world, SHOP_POS)


@pytest.fixture
def claimed_world():
    w = World("overworld", ui=LocalUIGateway(), claims=DenyingClaims())
    yield w
    w.close()


def test_claimed_land_names_the_owner(claimed_world):
    world = claimed_world
    player = world.spawn_player(uuid4(), "Ava")
    world.inventory_of(player).container[0] = ItemStack(LICENSE)
    world.set_block(SHOP_POS, ContainerBlock(CHEST, world.new_container()))

    outcome = use_license(world, player, SHOP_POS)

    assert outcome is LicenseOutcome.CLAIMED
    assert world.ui.texts(world.player_uuid(player)) == [
        LicenseOutcome.CLAIMED.message,
        "This area is claimed by: Dana",
    ]
    assert world.shop_at(SHOP_POS) is None
    assert held(world, player).quantity == 1
