"""Builds dungeon entities from their JSON records."""

import json
import logging

from .characters import DungeonMistress, Goblin
from .defs import MAX_NAME_LENGTH
from .pickups import Chest, Gold, Item, Silver
from .player import Prisoner
from .scenery import Bat, Door, FakeWall, Signpost, Stairs, Torch, Trigger, Wall
from .traders import Blacksmith, Merchant
from .util import read_file

log = logging.getLogger(__name__)

ENTITY_TYPES = {
    "player": Prisoner,
    "item": Item,
    "chest": Chest,
    "gold": Gold,
    "silver": Silver,
    "signpost": Signpost,
    "torch": Torch,
    "goblin": Goblin,
    "door": Door,
    "dungeonMistress": DungeonMistress,
    "merchant": Merchant,
    "blacksmith": Blacksmith,
    "bat": Bat,
    "wall": Wall,
    "fakeWall": FakeWall,
    "trigger": Trigger,
    "stairs": Stairs,
}

_HOLDERS = (Chest, Merchant, Blacksmith)
_MISSING = object()


class UnknownEntityError(Exception):
    """Raised for a record whose type names no known entity."""


def _lookup(data, key):
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    return _MISSING


def _required(data, key):
    value = _lookup(data, key)
    if value is _MISSING:
        raise KeyError(key)
    return value


def _int(value):
    if isinstance(value, (bool, int, float)):
        return int(value)
    return 0


def create_entity(world, data):
    """Create the entity described by ``data`` and place it in ``world``."""
    type_name = _required(data, "type")
    cls = ENTITY_TYPES.get(type_name) if isinstance(type_name, str) else None
    if cls is None:
        raise UnknownEntityError(f"Unknown entity type '{type_name}'")

    log.info("Loading entity '%s'", type_name)

    entity = cls()
    entities = world.entities
    entities.assign_id(entity)
    entities.add(entity)

    entity.id = _int(_required(data, "id"))
    entity.x = _int(_required(data, "x"))
    entity.y = _int(_required(data, "y"))

    name = _lookup(data, "name")
    if name is not _MISSING:
        if not isinstance(name, str):
            raise ValueError(f"'name' must be a string, not {name!r}")
        entity.name = name[: MAX_NAME_LENGTH - 1]

    entity.setup(world)
    entity.load(world, data)

    entities.next_id = max(entity.id, entities.next_id) + 1
    return entity


def post_load(world):
    """Hand each chest and trader the item it holds, taking it off the map."""
    for entity in world.entities:
        if isinstance(entity, _HOLDERS):
            entity.item = world.entities.by_id(entity.item_id)
            if entity.item is not None:
                world.entities.remove(entity.item)


def load_entities(world, records):
    """Create an entity for each record, then link held items; return them."""
    if isinstance(records, dict):
        records = list(records.values())
    created = [create_entity(world, record) for record in records]
    post_load(world)
    return created


def load_entities_file(world, filename="data/entities.json"):
    """Load every entity listed in a JSON file."""
    return load_entities(world, json.loads(read_file(filename)))