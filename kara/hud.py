"""Heads-up display: info messages, coin counts and inventory slots."""

from .defs import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, TextAlign

INFO_MESSAGE_LENGTH = 64
INFO_MESSAGE_TIME = FPS * 2.5

WHITE = (255, 255, 255)
GOLD_COLOR = (255, 200, 32)
SILVER_COLOR = (192, 192, 192)


class Hud:
    """State and drawing of the in-game overlay."""

    def __init__(self, slot_frame=None):
        self.slot_frame = slot_frame
        self.info_message = ""
        self.info_timer = 0.0
        self.show_location = False

    @property
    def info_visible(self):
        """True while the info message is on screen."""
        return self.info_timer > 0

    def set_info_message(self, message):
        """Show ``message`` for a couple of seconds."""
        self.info_timer = INFO_MESSAGE_TIME
        self.info_message = message[: INFO_MESSAGE_LENGTH - 1]

    def update(self, delta_time):
        """Count the info message down."""
        self.info_timer = max(self.info_timer - delta_time, 0)

    def draw(self, renderer, font, prisoner):
        """Draw the overlay for ``prisoner``."""
        if self.info_visible:
            font.draw(renderer, self.info_message, 10, SCREEN_HEIGHT - 50, WHITE, TextAlign.LEFT)

        font.draw(
            renderer, f"Gold: {prisoner.gold}",
            SCREEN_WIDTH - 15, SCREEN_HEIGHT - 50, GOLD_COLOR, TextAlign.RIGHT,
        )
        font.draw(
            renderer, f"Silver: {prisoner.silver}",
            SCREEN_WIDTH - 170, SCREEN_HEIGHT - 50, SILVER_COLOR, TextAlign.RIGHT,
        )

        for index, slot in enumerate(prisoner.inventory):
            x = (SCREEN_WIDTH - 360) - index * 80
            if self.slot_frame is not None:
                renderer.blit_atlas_image(self.slot_frame, x, SCREEN_HEIGHT - 28, True)
            if slot is not None and slot.texture is not None:
                renderer.blit_atlas_image(slot.texture, x, SCREEN_HEIGHT - 28, True)

        if self.show_location:
            font.draw(renderer, f"{prisoner.x},{prisoner.y}", 5, 5, WHITE, TextAlign.LEFT)