"""Window setup and the main loop."""

import argparse
import time

import pygame

from .atlas import Atlas
from .defs import LOGIC_RATE, MAX_SND_CHANNELS, SCREEN_HEIGHT, SCREEN_WIDTH
from .draw import Renderer
from .dungeon import Assets
from .input import QuitRequested
from .sound import SoundPlayer
from .text import Font
from .title import TitleScene
from .world import AppState

MUSIC_FILE = "music/A tricky puzzle_1.ogg"
BACKGROUND_FILE = "assets/background.jpg"


class FpsCounter:
    """Counts frames and reports the rate once per second."""

    def __init__(self, now):
        self.frames = 0
        self.fps = 0
        self.next_update = now + 1000

    def tick(self, now):
        """Count one frame at ``now`` milliseconds; return the last full rate."""
        self.frames += 1
        if now >= self.next_update:
            self.fps = self.frames
            self.frames = 0
            self.next_update = now + 1000
        return self.fps


def step_logic(app):
    """Run the scene logic in steps of at most one logic frame."""
    while app.delta_time > 1:
        remaining = app.delta_time
        app.delta_time = 1
        app.scene.logic()
        app.delta_time = remaining - 1
    app.scene.logic()


def run(app, renderer, clock=None):
    """Run frames until a quit is requested; ``clock`` returns milliseconds."""
    ticks = clock if clock is not None else pygame.time.get_ticks
    counter = FpsCounter(ticks())
    try:
        while True:
            then = ticks()
            renderer.prepare_scene()
            app.keyboard.poll()
            step_logic(app)
            app.scene.draw(renderer)
            renderer.present_scene()
            time.sleep(0.001)
            app.delta_time = LOGIC_RATE * (ticks() - then)
            app.fps = counter.tick(ticks())
    except QuitRequested:
        return


def _load_background(filename):
    try:
        image = pygame.image.load(filename)
    except (pygame.error, FileNotFoundError) as exc:
        print(f"Couldn't load background: {exc}")
        return None
    print(f"Background loaded: {image.get_width()}x{image.get_height()}")
    return image


def main(argv=None):
    """Open the window and play the game."""
    parser = argparse.ArgumentParser(prog="kara", description="Escape the dungeon.")
    parser.parse_args(argv)

    pygame.init()
    try:
        try:
            pygame.mixer.init(44100, -16, 2, 1024)
        except pygame.error as exc:
            print(f"Couldn't initialize mixer: {exc}")
            return 1
        pygame.mixer.set_num_channels(MAX_SND_CHANNELS)

        try:
            screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            print(f"Couldn't create window: {exc}")
            return 1
        pygame.display.set_caption("Kara")
        pygame.mouse.set_visible(False)

        atlas = Atlas.load()
        font = Font.from_file()
        sound = SoundPlayer(pygame.mixer)
        sound.load_sounds("sound")
        sound.load_music(MUSIC_FILE)
        sound.play_music(True)

        assets = Assets(atlas=atlas, font=font, sound=sound)
        app = AppState()
        app.scene = TitleScene(app, assets, _load_background(BACKGROUND_FILE))
        run(app, Renderer(screen))
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())