"""Closing screen with the player's final statistics."""

from .defs import FPS, SCREEN_WIDTH, Key, TextAlign
from .input import QuitRequested

WHITE = (255, 255, 255)
GREEN = (0, 255, 0)
RED = (255, 0, 0)
CONGRATULATIONS = "Congrats! You found your way out of the dungeon. You can go back now."
_STAT_ROWS = (400, 450, 500, 550, 650)


def stat_colour(actual, expected):
    """Green when a stat was maxed out, red otherwise."""
    return GREEN if actual == expected else RED


def format_time(time):
    """Render a play time counted in logic frames as minutes and seconds."""
    mins = int(time / (FPS * FPS))
    secs = int(time / FPS) % int(FPS)
    return f"{mins}m {secs:02d}s"


class Ending:
    """Scene shown once the prisoner has left the dungeon."""

    def __init__(self, app, world, font=None):
        self.app = app
        self.world = world
        self.font = font
        inventory = world.player.inventory
        self.has_eyeball = inventory.has("Eyeball")
        self.has_red_potion = inventory.has("Red potion")
        self.time_text = format_time(world.time)
        self.display_timer = FPS / 2

    def stats(self):
        """(label, value, colour) for each line of the statistics."""
        player = self.world.player
        world = self.world
        return [
            ("Gold :", f"{player.gold} / {world.num_gold}", stat_colour(player.gold, world.num_gold)),
            (
                "Silver :",
                f"{player.silver_found} / {world.num_silver}",
                stat_colour(player.silver_found, world.num_silver),
            ),
            ("Got Eyeball :", "Yes" if self.has_eyeball else "No", stat_colour(self.has_eyeball, True)),
            (
                "Got Red Potion :",
                "Yes" if self.has_red_potion else "No",
                stat_colour(self.has_red_potion, True),
            ),
            ("Time :", self.time_text, WHITE),
        ]

    def logic(self):
        """Wait briefly, then quit on space, return or escape."""
        self.display_timer = max(0, self.display_timer - self.app.delta_time)
        if self.display_timer == 0 and self.app.keyboard.any_down(Key.SPACE, Key.RETURN, Key.ESCAPE):
            raise QuitRequested()

    def draw(self, renderer):
        if self.display_timer != 0 or self.font is None:
            return
        font = self.font
        x = SCREEN_WIDTH // 2
        font.draw(renderer, CONGRATULATIONS, x, 50, WHITE, TextAlign.CENTER, 1000)
        for (label, value, colour), y in zip(self.stats(), _STAT_ROWS):
            font.draw(renderer, label, x, y, colour, TextAlign.RIGHT)
            font.draw(renderer, value, x + 15, y, colour, TextAlign.LEFT)