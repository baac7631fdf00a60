"""Characters the prisoner talks to: the goblin guard and the dungeon mistress."""

from dataclasses import dataclass
from enum import IntEnum

from .defs import Facing
from .entities import Entity
from .player import PRISONER_COLOR

GOBLIN_COLOR = (0, 64, 0)
MISTRESS_COLOR = (64, 0, 64)
MISTRESS = "Dungeon Mistress"


class _GoblinState(IntEnum):
    INIT = 0
    WANT_FOOD = 1


def _face(entity, other):
    entity.facing = Facing.RIGHT if other.x > entity.x else Facing.LEFT


@dataclass(eq=False)
class Goblin(Entity):
    """A hungry guard who leaves once fed some cheese."""

    state: int = _GoblinState.INIT

    def setup(self, world):
        self.texture = world.image("gfx/entities/goblin.png")
        self.solid = True

    def touch(self, world, other):
        if other is not world.player:
            return
        _face(self, other)
        me = GOBLIN_COLOR
        you = other.mb_color

        if self.state == _GoblinState.INIT:
            world.say("Prisoner", "Excuse me, do you mind if I just squeeze past?", you)
            world.say("Goblin", "Go away! I'm meant to be guarding this magical 'House' icon from the contestant. But I'm in a bad mood because I left my lunch in the fridge today, and I'm really hungry.", me)
            world.say("Goblin", "Now I'm going to have to wait until I get home, but I'm on an extended shift here so that's hours away. Stupid job, stupid contract.", me)
            world.say("Goblin", "So, unless you've got something to eat, you can just push off.", me)
            self.state = _GoblinState.WANT_FOOD

        elif self.state == _GoblinState.WANT_FOOD:
            if other.inventory.has("Cheese"):
                world.say("Prisoner", "Will this do?", you)
                world.say("Goblin", "Cheese! Wow, and it's a big lump, too!", me)
                world.say("Goblin", "Thanks, stranger, I'm going to go and enjoy this. Back soon.", me)
                other.inventory.remove("Cheese", world.entities)
                self.alive = False
            else:
                world.say("Goblin", "Unless you've got some food, I don't want to talk to you.", me)


@dataclass(eq=False)
class DungeonMistress(Entity):
    """Host of the game; collects the icons and unlocks the exit."""

    icons_found: int = 0

    def setup(self, world):
        self.texture = world.image("gfx/entities/dungeonMistress.png")
        self.solid = True
        self.facing = Facing.RIGHT

        me = MISTRESS_COLOR
        player = world.player
        you = player.mb_color if player is not None else PRISONER_COLOR

        world.say(MISTRESS, "Let's have a big hand for the latest contestant to enter The Dungeon!\n\nWhoop! Yeah! Wave those hands, people!", me)
        world.say(MISTRESS, "How are you feeling today?", me)
        world.say("Prisoner", "Um ... okay? I'm cold and hungry. And my clothes have all fallen apart.", you)
        world.say(MISTRESS, "That's the spirit! Ha ha ha! Right, do you know the rules?", me)
        world.say("Prisoner", "Find the four icons and bring them back to you.", you)
        world.say(MISTRESS, "Heh heh heh! You make it sound so easy. If only that was the case.", me)
        world.say(MISTRESS, "Yes, bring me the four magic icons scattered around this dungeon and you can earn your freedom.", me)
        world.say("Prisoner", "Can I keep any gold I find?", you)
        world.say(MISTRESS, "As much as you like, darling. It's worthless in today's society, as you know. Everyone is using Dogecoin.", me)
        world.say(MISTRESS, "Anyway, good luck. You'll need it. LOL!", me)

    def touch(self, world, other):
        if other is not world.player:
            return
        _face(self, other)
        me = MISTRESS_COLOR
        you = other.mb_color

        if other.inventory.has("Icon"):
            other.inventory.remove("Icon", world.entities)
            self.icons_found += 1

            if self.icons_found == 1:
                world.say("Prisoner", "I got one of the icons!", you)
                world.say(MISTRESS, "You found one? Beginner's luck, I guess. Well, don't expect the others to come so easily. I'll just take that from you ...", me)
            elif self.icons_found == 2:
                world.say("Prisoner", "Here you go ...", you)
                world.say(MISTRESS, "Another one? No, you're cheating. This has got to be a fake. I'll have it checked ...", me)
            elif self.icons_found == 3:
                world.say("Prisoner", "another one.gif", you)
                world.say(MISTRESS, "What the flip?! Stop looking up the answers on the internet!", me)
                world.say("Prisoner", "See you again in a bit.", you)
            elif self.icons_found == 4:
                world.say("Prisoner", "Look! I found the last one!", you)
                world.say(MISTRESS, "No! That's not possible! It's ... no.", me)
                world.say("Prisoner", "So, can I go home now?", you)
                world.say(MISTRESS, "Ugh.", me)
                world.say(MISTRESS, "Fine, fine, get out of here. The exit's unlocked. Leave. I never want to see you again.", me)
                world.entities.activate(world, "ExitDoor")
            return

        replies = {
            0: "Not found any yet? Aw, poor baby. Going to be here at while, aren't you? Heh heh heh!",
            1: "Don't get excited, hon. You've only found one icon so far.",
            2: "Halfway there, but you'll never find the rest. You'll starve to death down here. Ha ha ha!",
            3: "I've had the WiFi password changed, so you can't keep cheating. You're not going to break my winning streak.",
            4: "Go away. I'm not talking to you any more.",
        }
        reply = replies.get(self.icons_found)
        if reply is not None:
            world.say(MISTRESS, reply, me)