from kara.defs import Facing
from kara.entities import Entity
from kara.player import Prisoner
from kara.traders import BLACKSMITH_COLOR, SILVER_REQUIRED, Blacksmith, Merchant
from kara.world import World


def make_world():
    world = World()
    player = Prisoner(x=5, y=5)
    world.player = player
    world.entities.add(player)
    return world, player


def messages(world):
    return [(m.speaker, m.message) for m in world.messages]


def test_blacksmith_setup_and_load():
    world, _ = make_world()
    b = Blacksmith(x=3, y=5)
    b.setup(world)
    b.load(world, {"ITEMID": 7})
    assert b.name == "Blacksmith"
    assert b.solid is True
    assert b.item_id == 7


def test_blacksmith_first_touch_tells_story():
    world, player = make_world()
    b = Blacksmith(x=3, y=5)
    b.touch(world, player)
    msgs = messages(world)
    assert len(msgs) == 8
    assert msgs[2][1].startswith(f"I do! All I'll need is {SILVER_REQUIRED} silver coins.")
    assert world.messages.current.color == BLACKSMITH_COLOR
    assert b.facing == Facing.RIGHT


def test_blacksmith_ignores_others():
    world, _ = make_world()
    b = Blacksmith()
    b.touch(world, Entity(x=1))
    assert len(world.messages) == 0


def test_blacksmith_no_silver_and_short():
    world, player = make_world()
    b = Blacksmith(x=9, y=5)
    b.touch(world, player)
    assert b.facing == Facing.LEFT
    before = len(world.messages)
    b.touch(world, player)
    assert messages(world)[before:] == [
        ("Blacksmith", "Let me know when you find all the silver.")
    ]
    player.silver = 5
    b.touch(world, player)
    last = messages(world)[-1][1]
    assert "still short 9" in last
    assert player.silver == 5


def test_blacksmith_trades_dagger():
    world, player = make_world()
    dagger = Entity(name="Dagger")
    b = Blacksmith(x=3, y=5, item=dagger)
    b.touch(world, player)
    player.silver = SILVER_REQUIRED
    b.touch(world, player)
    assert player.has_dagger
    assert player.silver == 0
    assert b.item is None
    before = len(world.messages)
    b.touch(world, player)
    assert messages(world)[before][1].startswith("Nom nom nom!")


def test_blacksmith_full_inventory_keeps_silver():
    world, player = make_world()
    player.inventory.add(Entity(name="Rock"))
    player.inventory.add(Entity(name="Stone"))
    dagger = Entity(name="Dagger")
    b = Blacksmith(item=dagger)
    b.touch(world, player)
    player.silver = SILVER_REQUIRED
    b.touch(world, player)
    assert player.silver == SILVER_REQUIRED
    assert b.item is dagger
    assert messages(world)[-1][1].startswith("I can't carry anything else.")


def test_merchant_setup_and_intro():
    world, player = make_world()
    m = Merchant(x=3, y=5)
    m.setup(world)
    m.load(world, {"itemId": 4})
    assert m.name == "Merchant"
    assert m.item_id == 4
    m.touch(world, player)
    assert len(world.messages) == 8
    m.touch(world, player)
    assert messages(world)[-1] == (
        "Merchant", "Give me a shout when that Rumours record turns up, will you?"
    )


def test_merchant_swaps_album_for_lantern():
    world, player = make_world()
    lantern = Entity(name="Lantern")
    album = Entity(name="Rumours")
    m = Merchant(item=lantern)
    m.touch(world, player)
    player.inventory.add(album)
    m.touch(world, player)
    assert not player.inventory.has("Rumours")
    assert player.has_lantern
    assert album.alive is False
    assert album in world.entities
    assert m.item is None
    m.touch(world, player)
    assert messages(world)[-1][1].startswith("Can't wait to get home tonight")