from dataclasses import dataclass, field

from kara.defs import MAP_RENDER_WIDTH, TILE_SIZE, Facing
from kara.entities import Entity, EntityList


@dataclass(eq=False)
class Switch(Entity):
    calls: list = field(default_factory=list)

    def activate(self, world):
        self.calls.append(world)


class Recorder:
    def __init__(self):
        self.calls = []

    def blit_atlas_image(self, image, x, y, center=False, flip=False, alpha=255):
        self.calls.append((image, x, y, center, flip))


def test_assign_id_counts_up():
    entities = EntityList()
    a, b = Entity(), Entity()
    assert entities.assign_id(a) == 0
    assert entities.assign_id(b) == 1
    assert (a.id, b.id) == (0, 1)
    assert entities.next_id == 2


def test_add_keeps_order_and_identity():
    entities = EntityList()
    a, b = Entity(name="a"), Entity(name="b")
    entities.add(a)
    entities.add(b)
    assert [e.name for e in entities] == ["a", "b"]
    assert len(entities) == 2
    assert a in entities
    assert Entity(name="a") not in entities


def test_remove_member_and_non_member():
    entities = EntityList()
    a, b = Entity(), Entity()
    entities.add(a)
    entities.add(b)
    assert entities.remove(a) is True
    assert list(entities) == [b]
    assert entities.remove(a) is False
    assert len(entities) == 1


def test_remove_dead():
    entities = EntityList()
    living, dead = Entity(), Entity(alive=False)
    entities.add(living)
    entities.add(dead)
    removed = entities.remove_dead()
    assert removed == [dead]
    assert list(entities) == [living]


def test_at_returns_first_on_cell():
    entities = EntityList()
    first, second = Entity(x=3, y=4), Entity(x=3, y=4)
    entities.add(first)
    entities.add(second)
    assert entities.at(3, 4) is first
    assert entities.at(4, 3) is None


def test_by_id():
    entities = EntityList()
    e = Entity(id=7)
    entities.add(e)
    assert entities.by_id(7) is e
    assert entities.by_id(8) is None


def test_activate_only_matching_names():
    entities = EntityList()
    door, other = Switch(name="ExitDoor"), Switch(name="Other")
    entities.add(door)
    entities.add(other)
    entities.activate("world", "ExitDoor")
    assert door.calls == ["world"]
    assert other.calls == []


def test_draw_positions_and_flip():
    entities = EntityList()
    left = Entity(x=2, y=1, texture="tex")
    right = Entity(x=2, y=1, texture="tex", facing=Facing.RIGHT)
    hidden = Entity(x=2 + MAP_RENDER_WIDTH, y=1, texture="tex")
    dead = Entity(x=2, y=1, texture="tex", alive=False)
    blank = Entity(x=2, y=1)
    for e in (left, right, hidden, dead, blank):
        entities.add(e)
    recorder = Recorder()
    entities.draw(recorder, (2, 1), (10, 20))
    expected_x = TILE_SIZE // 2 + 10
    expected_y = TILE_SIZE // 2 + 20
    assert recorder.calls == [
        ("tex", expected_x, expected_y, True, False),
        ("tex", expected_x, expected_y, True, True),
    ]