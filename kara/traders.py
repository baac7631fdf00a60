"""Characters who trade an item for something the prisoner brings them."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

from .defs import Facing
from .entities import Entity

SILVER_REQUIRED = 14
BLACKSMITH_COLOR = (64, 16, 64)
MERCHANT_COLOR = (16, 32, 64)


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


def _face(entity, other):
    entity.facing = Facing.RIGHT if other.x > entity.x else Facing.LEFT


class _BlacksmithState(IntEnum):
    INIT = 0
    NEED_SILVER = 1
    HAS_SILVER = 2


class _MerchantState(IntEnum):
    INIT = 0
    WANT_ALBUM = 1
    HAS_ALBUM = 2


@dataclass(eq=False)
class Blacksmith(Entity):
    """Forges a dagger in exchange for the dungeon's silver coins."""

    state: int = _BlacksmithState.INIT
    item_id: int = 0
    item: Optional[Any] = None

    def setup(self, world):
        self.name = "Blacksmith"
        self.texture = world.image("gfx/entities/blacksmith.png")
        self.solid = True

    def load(self, world, data):
        self.item_id = _int(_field(data, "itemId"))

    def touch(self, world, other):
        if other is not world.player:
            return
        _face(self, other)
        me = BLACKSMITH_COLOR
        you = other.mb_color

        if self.state == _BlacksmithState.INIT:
            world.say("Blacksmith", "Alright, mate? The devil in the blue dress got you playing her little game, has she? You're not going to have much luck against the vampire bats using just your bare hands.", me)
            world.say("Prisoner", "I was thinking the same. Got a magical sword or something you can sell me?", you)
            world.say("Blacksmith", f"I do! All I'll need is {SILVER_REQUIRED} silver coins. You'll find plenty lying around the dungeon, I'm sure.", me)
            world.say("Prisoner", "Ha, I see. You'd melt down the silver into the blade of a magical weapon, to use against the bats?", you)
            world.say("Blacksmith", "What? No! Those aren't real silver. They're just chocolate, wrapped in silver paper.", me)
            world.say("Prisoner", "...", you)
            world.say("Prisoner", "What about gold?", you)
            world.say("Blacksmith", "Got plenty of that, mate.", me)
            self.state = _BlacksmithState.NEED_SILVER

        elif self.state == _BlacksmithState.NEED_SILVER:
            if other.silver == 0:
                world.say("Blacksmith", "Let me know when you find all the silver.", me)
            elif other.silver < SILVER_REQUIRED:
                short = SILVER_REQUIRED - other.silver
                world.say("Prisoner", "I managed to find some.", you)
                world.say("Blacksmith", f"Sorry, pal, still short {short}. Gonna need all {SILVER_REQUIRED}.", me)
            elif self.item is None or other.inventory.add(self.item, world.entities):
                world.say("Prisoner", "Phew, I think that's all you need?", you)
                world.say("Blacksmith", "Get in! You legend! Here's the dagger, as promised. You know how to use it?", me)
                world.say("Prisoner", "You stick 'em with the pointy end.", you)
                world.say("Blacksmith", "That's the spirit! Best of luck, mate.", me)
                other.silver -= SILVER_REQUIRED
                self.item = None
                self.state = _BlacksmithState.HAS_SILVER
            else:
                world.say("Prisoner", "I can't carry anything else. I'll need to drop something before I can get the dagger.", you)

        elif self.state == _BlacksmithState.HAS_SILVER:
            world.say("Blacksmith", "Nom nom nom! These coins are really good. I love dark chocolate. None of that milk chocolate stuff for me.", me)


@dataclass(eq=False)
class Merchant(Entity):
    """Swaps a lantern for a certain record album."""

    state: int = _MerchantState.INIT
    item_id: int = 0
    item: Optional[Any] = None

    def setup(self, world):
        self.name = "Merchant"
        self.texture = world.image("gfx/entities/merchant.png")
        self.solid = True

    def load(self, world, data):
        self.item_id = _int(_field(data, "itemId"))

    def touch(self, world, other):
        if other is not world.player:
            return
        _face(self, other)
        me = MERCHANT_COLOR
        you = other.mb_color

        if self.state == _MerchantState.INIT:
            world.say("Merchant", "Hey, I hear you've been tasked with finding all those magical icons. I might have something that will help you.", me)
            world.say("Prisoner", "A map?", you)
            world.say("Merchant", "Noooooo, don't be silly. A lantern, to help you find your way through the crushing darkness of The Cursed Maze, over in east.", me)
            world.say("Prisoner", "How much gold will it cost me?", you)
            world.say("Merchant", "Gold? I don't want gold, I've got plenty of that already. What I want is a copy of Fleetwood Mac's Rumours album, on vinyl. I heard there's a copy somewhere in this dungeon.", me)
            world.say("Prisoner", "Would a 192kbs MP3 do?", you)
            world.say("Merchant", "...", me)
            world.say("Prisoner", "Sorry, that was in poor taste.", you)
            self.state = _MerchantState.WANT_ALBUM

        elif self.state == _MerchantState.WANT_ALBUM:
            if other.inventory.has("Rumours"):
                world.say("Prisoner", "I found this in the store room.", you)
                world.say("Merchant", "No way! That's awesome. I've got the album on CD, but vinyl just sounds better, you know.", me)
                world.say("Prisoner", "That's not actually true, it's ...", you)
                world.say("Merchant", "VINYL. SOUNDS. BETTER. Nick Cage said so, in The Rock.", me)
                world.say("Prisoner", "Actually a decent Michael Bay film, that.", you)
                world.say("Merchant", "Agreed. Anyway, here's the lantern I promised you.", me)
                world.say("Prisoner", "What the heck?!", you)
                world.say("Merchant", "Okay, it's a Jack-o'-lantern, but it still works.", me)
                world.say("Prisoner", "Right ...", you)

                other.inventory.remove("Rumours", world.entities)
                if self.item is not None:
                    other.inventory.add(self.item, world.entities)
                self.item = None
                self.state = _MerchantState.HAS_ALBUM
            else:
                world.say("Merchant", "Give me a shout when that Rumours record turns up, will you?", me)

        elif self.state == _MerchantState.HAS_ALBUM:
            world.say("Merchant", "Can't wait to get home tonight and whack this bad boy on my turntable.", me)