"""Fixed pieces of the dungeon: doors, walls, triggers, signs and such."""

from dataclasses import dataclass

from .defs import MAX_LINE_LENGTH, MAX_NAME_LENGTH, SoundId
from .entities import Entity

WALL_IMAGE = "gfx/tiles/40.png"
TORCH_VIS_DISTANCE = 32
SIGNPOST_SPEAKER = "mail monster"
SIGNPOST_COLOR = (90, 70, 30)


def _field(data, key):
    """Value stored under ``key``, matched without regard to case."""
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    raise KeyError(key)


def _int(value):
    if isinstance(value, (bool, int, float)):
        return int(value)
    return 0


def _str(value, key):
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, not {value!r}")
    return value


@dataclass(eq=False)
class Door(Entity):
    """A door that opens when bumped unless locked."""

    locked: bool = False

    def setup(self, world):
        self.texture = world.image("gfx/entities/door.png")
        self.solid = True

    def load(self, world, data):
        self.locked = bool(_int(_field(data, "locked")))

    def touch(self, world, other):
        if other is not world.player:
            return
        if self.locked:
            world.info("The door's locked.")
        else:
            self.alive = False
            world.play_sound(SoundId.DOOR, 1)

    def activate(self, world):
        self.locked = not self.locked


@dataclass(eq=False)
class FakeWall(Entity):
    """Looks like a wall but vanishes when bumped."""

    def setup(self, world):
        self.texture = world.image(WALL_IMAGE)
        self.solid = True

    def touch(self, world, other):
        if other is not world.player:
            return
        world.info("A secret is revealed!")
        self.alive = False
        world.play_sound(SoundId.SECRET, 1)


@dataclass(eq=False)
class Wall(Entity):
    """A wall that triggers can raise and lower."""

    def load(self, world, data):
        self.solid = bool(_int(_field(data, "solid")))
        self._update_texture(world)

    def activate(self, world):
        self.solid = not self.solid
        self._update_texture(world)

    def _update_texture(self, world):
        self.texture = world.image(WALL_IMAGE) if self.solid else None


@dataclass(eq=False)
class Trigger(Entity):
    """An invisible plate that activates entities named ``target``, once."""

    target: str = ""

    def load(self, world, data):
        self.target = _str(_field(data, "target"), "target")[: MAX_NAME_LENGTH - 1]

    def touch(self, world, other):
        if other is not world.player:
            return
        world.entities.activate(world, self.target)
        self.alive = False


@dataclass(eq=False)
class Stairs(Entity):
    """The way out; reaching it completes the dungeon."""

    def setup(self, world):
        self.texture = world.image("gfx/entities/stairs.png")

    def touch(self, world, other):
        if other is world.player:
            world.complete = True


@dataclass(eq=False)
class Torch(Entity):
    """A wall torch that lights its surroundings once placed."""

    def setup(self, world):
        self.texture = world.image("gfx/entities/torch.png")
        self.solid = True
        world.light(self, TORCH_VIS_DISTANCE)


@dataclass(eq=False)
class Signpost(Entity):
    """A sign whose message is shown as dialogue."""

    message: str = ""

    def setup(self, world):
        self.texture = world.image("gfx/entities/signpost.png")
        self.solid = True

    def load(self, world, data):
        self.message = _str(_field(data, "message"), "message")[: MAX_LINE_LENGTH - 1]

    def touch(self, world, other):
        if other is world.player:
            world.say(SIGNPOST_SPEAKER, self.message, SIGNPOST_COLOR)


@dataclass(eq=False)
class Bat(Entity):
    """A vampire bat that blocks the way unless the prisoner has a dagger."""

    def setup(self, world):
        self.texture = world.image("gfx/entities/vampireBat.png")
        self.solid = True

    def touch(self, world, other):
        if other is not world.player:
            return
        if other.has_dagger:
            self.alive = False
            world.play_sound(SoundId.BAT, 1)
        else:
            world.say("Prisoner", "Ouch! It bit me. I can't get past.", other.mb_color)