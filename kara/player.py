"""The prisoner: the entity the player moves around the dungeon."""

from dataclasses import dataclass, field

from .defs import Facing, Key, SoundId
from .entities import Entity
from .inventory import Inventory

VIS_DISTANCE = 8
MOVE_DELAY = 5
PRISONER_COLOR = (32, 32, 32)


@dataclass(eq=False)
class Prisoner(Entity):
    """The player's character, with coins and an inventory."""

    gold: int = 0
    silver: int = 0
    silver_found: int = 0
    inventory: Inventory = field(default_factory=Inventory)
    mb_color: tuple = PRISONER_COLOR
    move_delay: float = 0.0

    @property
    def has_lantern(self):
        return self.inventory.has_lantern()

    @property
    def has_dagger(self):
        return self.inventory.has_dagger()

    def setup(self, world):
        world.player = self
        self.solid = True
        self.texture = world.image("gfx/entities/prisoner.png")
        self.facing = Facing.LEFT
        self.move(world, 0, 0)
        self.move_delay = 0.0

    def move(self, world, dx, dy):
        """Step by (dx, dy) if the cell is free, touching whatever is there."""
        game_map = world.game_map
        x = max(0, min(self.x + dx, game_map.width - 1))
        y = max(0, min(self.y + dy, game_map.height - 1))

        if not game_map.is_walkable(x, y):
            return

        other = world.entities.at(x, y)

        if other is None or not other.solid or other is self:
            self.x = x
            self.y = y
            world.center_camera(x, y)
            self.move_delay = MOVE_DELAY
            if dx != 0 or dy != 0:
                world.play_sound(SoundId.WALK, 0)

        if other is not None:
            other.touch(world, self)

        world.light(self, VIS_DISTANCE)

    def update(self, world, keyboard, delta_time):
        """Move from the held keys; return True when the inventory is asked for."""
        self.move_delay = max(0, self.move_delay - delta_time)
        if self.move_delay != 0:
            return False

        if keyboard.is_down(Key.A):
            self.move(world, -1, 0)
            self.facing = Facing.LEFT

        if keyboard.is_down(Key.D):
            self.move(world, 1, 0)
            self.facing = Facing.RIGHT

        if keyboard.is_down(Key.W):
            self.move(world, 0, -1)

        if keyboard.is_down(Key.S):
            self.move(world, 0, 1)

        return keyboard.consume(Key.TAB)