"""Title screen shown before the dungeon starts."""

import pygame

from .defs import FPS, SCREEN_HEIGHT, SCREEN_WIDTH, Key, TextAlign
from .dungeon import DungeonScene, create_world

LOGO_Y = 150
GREY = (128, 128, 128)


class TitleScene:
    """Fades the logo in and waits for space to be pressed."""

    def __init__(self, app, assets, background=None):
        self.app = app
        self.assets = assets
        self.background = background
        self.logo1 = assets.image("gfx/misc/logo1.png")
        self.logo2 = assets.image("gfx/misc/logo2.png")
        self.logo_alpha = 0.0
        self.goto_dungeon = False
        self.tick = 0.0
        self.goto_timer = FPS / 2
        self._scaled = None

    @property
    def prompt_colour(self):
        """Grey level of the blinking prompt."""
        c = 255 if int(self.tick) % int(FPS) < FPS / 2 else 192
        return (c, c, c)

    def logic(self):
        app = self.app
        if not self.goto_dungeon:
            self.logo_alpha = min(self.logo_alpha + app.delta_time * 2, 255)
            self.tick += app.delta_time
            if app.keyboard.consume(Key.SPACE):
                self.goto_dungeon = True
        else:
            self.goto_timer -= app.delta_time
            if self.goto_timer <= 0:
                world = create_world(self.assets)
                app.scene = DungeonScene(app, world, self.assets)

    def draw(self, renderer):
        if self.goto_dungeon:
            return
        if self.background is not None:
            self._draw_background(renderer)
        self._draw_logo(renderer)
        font = self.assets.font
        if font is not None:
            font.draw(renderer, "Press Space!", SCREEN_WIDTH // 2, 400, self.prompt_colour, TextAlign.CENTER)
            font.draw(
                renderer, "Made by Team BIT @2025",
                SCREEN_WIDTH // 2, SCREEN_HEIGHT - 50, GREY, TextAlign.CENTER,
            )

    def _draw_background(self, renderer):
        size = renderer.surface.get_size()
        if self._scaled is None or self._scaled.get_size() != size:
            self._scaled = pygame.transform.scale(self.background, size)
        renderer.surface.blit(self._scaled, (0, 0))

    def _draw_logo(self, renderer):
        if self.logo1 is None or self.logo2 is None:
            return
        x = (SCREEN_WIDTH - (self.logo1.rect.w + self.logo2.rect.w)) // 2
        alpha = int(self.logo_alpha)
        renderer.blit_atlas_image(self.logo1, x, LOGO_Y, False, False, alpha)
        renderer.blit_atlas_image(self.logo2, x + self.logo1.rect.w, LOGO_Y, False, False, alpha)