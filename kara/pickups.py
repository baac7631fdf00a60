"""Things the prisoner can pick up: coins, items and locked chests."""

from dataclasses import dataclass
from typing import Any, Optional

from .defs import SoundId
from .entities import Entity


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
class Gold(Entity):
    """A pile of gold coins worth ``value``."""

    value: int = 0

    def load(self, world, data):
        self.value = _int(_field(data, "value"))
        if self.value > 1:
            self.texture = world.image("gfx/entities/goldCoins.png")
        else:
            self.texture = world.image("gfx/entities/goldCoin.png")
        world.num_gold += self.value

    def touch(self, world, other):
        if other is not world.player:
            return
        other.gold += self.value
        self.alive = False
        if self.value == 1:
            world.info("Picked up a gold coin.")
        else:
            world.info(f"Picked up {self.value} gold coins.")
        world.play_sound(SoundId.COIN, 1)


@dataclass(eq=False)
class Silver(Entity):
    """A single silver coin."""

    def setup(self, world):
        self.texture = world.image("gfx/entities/silverCoin.png")
        world.num_silver += 1

    def touch(self, world, other):
        if other is not world.player:
            return
        other.silver += 1
        other.silver_found += 1
        self.alive = False
        world.info("Picked up a silver coin.")
        world.play_sound(SoundId.COIN, 1)


@dataclass(eq=False)
class Item(Entity):
    """An object that goes into the prisoner's inventory."""

    def load(self, world, data):
        self.texture = world.image(_str(_field(data, "texture"), "texture"))

    def touch(self, world, other):
        if other is not world.player:
            return
        if other.inventory.add(self, world.entities):
            world.info(f"Picked up {self.name}")
            world.play_sound(SoundId.ITEM, 1)
        else:
            world.info("Can't carry anything else.")


@dataclass(eq=False)
class Chest(Entity):
    """A locked chest holding one item; a rusty key opens it."""

    is_open: bool = False
    item_id: int = 0
    item: Optional[Any] = None

    def setup(self, world):
        self.name = "Chest"
        self.texture = world.image("gfx/entities/chest.png")
        self.solid = True

    def load(self, world, data):
        self.item_id = _int(_field(data, "itemId"))

    def touch(self, world, other):
        if other is not world.player or self.is_open:
            return
        if not other.inventory.has("Rusty key"):
            world.info("It's locked and I don't have a key.")
            return

        self.is_open = True
        self.texture = world.image("gfx/entities/openChest.png")
        other.inventory.remove("Rusty key", world.entities)

        item = self.item
        if item is not None:
            other.inventory.add(item, world.entities)
            world.info(f"Got {item.name}")
        self.item = None

        world.play_sound(SoundId.CHEST, 1)