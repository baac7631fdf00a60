"""Game entities and the ordered list the dungeon keeps them in."""

from dataclasses import dataclass, field
from typing import Any

from .defs import MAP_RENDER_HEIGHT, MAP_RENDER_WIDTH, TILE_SIZE, Facing


@dataclass(eq=False)
class Entity:
    """Something standing on a map cell: a character, item or piece of scenery."""

    id: int = 0
    x: int = 0
    y: int = 0
    name: str = ""
    facing: Facing = Facing.LEFT
    alive: bool = True
    solid: bool = False
    texture: Any = field(default=None, repr=False)

    def setup(self, world):
        """Prepare the entity once it has been placed."""
        self.facing = Facing(self.facing)

    def touch(self, world, other):
        """React to ``other`` bumping into this entity.

        Plain entities do not react; the result tells whether this one
        blocks ``other``.
        """
        return bool(self.solid)

    def load(self, world, data):
        """Read extra settings from the entity's record; takes a name if it has none."""
        if self.name:
            return
        for key, value in data.items():
            if key.lower() == "name" and isinstance(value, str):
                self.name = value
                return

    def activate(self, world):
        """React to being switched by a trigger.

        The result tells whether the entity responded; plain entities ignore it.
        """
        return False


class EntityList:
    """The dungeon's entities, kept in the order they were added."""

    def __init__(self):
        self._entities = []
        self.next_id = 0

    def __iter__(self):
        return iter(list(self._entities))

    def __len__(self):
        return len(self._entities)

    def __contains__(self, entity):
        return any(e is entity for e in self._entities)

    def assign_id(self, entity):
        """Give ``entity`` the next free id and return it."""
        entity.id = self.next_id
        self.next_id += 1
        return entity.id

    def add(self, entity):
        """Append ``entity`` to the end of the list."""
        self._entities.append(entity)

    def remove(self, entity):
        """Take ``entity`` out of the list; return whether it was there."""
        for index, e in enumerate(self._entities):
            if e is entity:
                del self._entities[index]
                return True
        return False

    def remove_dead(self):
        """Drop every dead entity and return the ones dropped."""
        dead = [e for e in self._entities if not e.alive]
        self._entities = [e for e in self._entities if e.alive]
        return dead

    def at(self, x, y):
        """The first entity on cell (x, y), or None."""
        return next((e for e in self._entities if e.x == x and e.y == y), None)

    def by_id(self, entity_id):
        """The entity with id ``entity_id``, or None."""
        return next((e for e in self._entities if e.id == entity_id), None)

    def activate(self, world, name):
        """Activate every entity called ``name``."""
        for e in list(self._entities):
            if e.name == name:
                e.activate(world)

    def draw(self, renderer, camera, offset):
        """Draw the living entities in view; ``camera`` and ``offset`` are (x, y) pairs."""
        cam_x, cam_y = (int(v) for v in camera)
        off_x, off_y = (int(v) for v in offset)
        for e in self._entities:
            if not e.alive or e.texture is None:
                continue
            x = e.x - cam_x
            y = e.y - cam_y
            if 0 <= x < MAP_RENDER_WIDTH and 0 <= y < MAP_RENDER_HEIGHT:
                px = x * TILE_SIZE + TILE_SIZE // 2 + off_x
                py = y * TILE_SIZE + TILE_SIZE // 2 + off_y
                renderer.blit_atlas_image(e.texture, px, py, True, e.facing != Facing.LEFT)