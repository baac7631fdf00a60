"""Game-wide constants and enumerations."""

from enum import IntEnum

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

FPS = 60.0
LOGIC_RATE = FPS / 1000

MAX_NAME_LENGTH = 32
MAX_FILENAME_LENGTH = 256
MAX_LINE_LENGTH = 1024

MAX_KEYBOARD_KEYS = 350

MAX_SND_CHANNELS = 16

TILE_SIZE = 64

MAX_TILES = 64

MAP_WIDTH = 180
MAP_HEIGHT = 90

MAP_RENDER_WIDTH = 19
MAP_RENDER_HEIGHT = 10

TILE_HOLE = 0
TILE_GROUND = 1
TILE_DARK = 35
TILE_WALL = 40

NUM_INVENTORY_SLOTS = 2


class Facing(IntEnum):
    """Direction a sprite faces."""

    LEFT = 0
    RIGHT = 1


class TextAlign(IntEnum):
    """Horizontal alignment of drawn text."""

    LEFT = 0
    CENTER = 1
    RIGHT = 2


class SoundId(IntEnum):
    """Sound effects the game can play."""

    WALK = 0
    DOOR = 1
    CHEST = 2
    COIN = 3
    ITEM = 4
    SECRET = 5
    CHAT = 6
    BAT = 7


class Key(IntEnum):
    """Keyboard scancodes the game reacts to."""

    A = 4
    D = 7
    S = 22
    W = 26
    RETURN = 40
    ESCAPE = 41
    TAB = 43
    SPACE = 44
    DOWN = 81
    UP = 82