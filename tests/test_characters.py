from kara.characters import MISTRESS, MISTRESS_COLOR, DungeonMistress, Goblin
from kara.defs import Facing
from kara.entities import Entity
from kara.player import Prisoner
from kara.scenery import Door
from kara.world import World


def make_world():
    world = World()
    player = Prisoner(x=5, y=5)
    world.player = player
    world.entities.add(player)
    return world, player


def messages(world):
    return [(m.speaker, m.message) for m in world.messages]


def test_goblin_intro_then_refuses():
    world, player = make_world()
    g = Goblin(x=7, y=5)
    g.setup(world)
    assert g.solid is True
    g.touch(world, player)
    assert len(world.messages) == 4
    assert g.facing == Facing.LEFT
    g.touch(world, player)
    assert messages(world)[-1] == (
        "Goblin", "Unless you've got some food, I don't want to talk to you."
    )
    assert g.alive


def test_goblin_eats_cheese_and_leaves():
    world, player = make_world()
    g = Goblin()
    g.touch(world, player)
    player.inventory.add(Entity(name="Cheese"))
    g.touch(world, player)
    assert not player.inventory.has("Cheese")
    assert g.alive is False
    assert messages(world)[-3] == ("Prisoner", "Will this do?")


def test_goblin_ignores_other_entities():
    world, _ = make_world()
    g = Goblin()
    g.touch(world, Entity())
    assert len(world.messages) == 0


def test_mistress_setup_queues_intro():
    world, player = make_world()
    d = DungeonMistress(x=3, y=5)
    d.setup(world)
    assert d.facing == Facing.RIGHT
    assert len(world.messages) == 10
    first = world.messages.current
    assert first.speaker == MISTRESS
    assert first.color == MISTRESS_COLOR
    assert [m.color for m in world.messages][2] == player.mb_color


def test_mistress_without_icon():
    world, player = make_world()
    d = DungeonMistress(x=3, y=5)
    d.touch(world, player)
    assert d.icons_found == 0
    assert messages(world) == [
        (MISTRESS, "Not found any yet? Aw, poor baby. Going to be here at while, aren't you? Heh heh heh!")
    ]


def test_mistress_collects_icons_and_unlocks_exit():
    world, player = make_world()
    door = Door(name="ExitDoor", locked=True)
    world.entities.add(door)
    d = DungeonMistress()
    for count in range(1, 5):
        player.inventory.add(Entity(name="Icon"))
        d.touch(world, player)
        assert d.icons_found == count
        assert not player.inventory.has("Icon")
        assert door.locked is (count < 4)
    assert messages(world)[-1][1].startswith("Fine, fine, get out of here.")
    d.touch(world, player)
    assert messages(world)[-1] == (MISTRESS, "Go away. I'm not talking to you any more.")
    assert d.icons_found == 4