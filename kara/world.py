"""Shared game state: the running app and the dungeon world."""

from dataclasses import dataclass, field
from typing import Any, Optional

from .defs import MAP_RENDER_HEIGHT, MAP_RENDER_WIDTH, SCREEN_WIDTH, TILE_SIZE
from .entities import EntityList
from .fog import FogOfWar
from .gamemap import GameMap
from .hud import Hud
from .input import Keyboard
from .messagebox import MessageQueue

RENDER_OFFSET = ((SCREEN_WIDTH - MAP_RENDER_WIDTH * TILE_SIZE) // 2, 20)


@dataclass
class AppState:
    """The running application: current scene, keys held and frame timing."""

    scene: Any = None
    keyboard: Keyboard = field(default_factory=Keyboard)
    delta_time: float = 0.0
    fps: int = 0


@dataclass(eq=False)
class World:
    """Everything that makes up the dungeon being played."""

    game_map: GameMap = field(default_factory=GameMap)
    entities: EntityList = field(default_factory=EntityList)
    messages: MessageQueue = field(default_factory=MessageQueue)
    hud: Hud = field(default_factory=Hud)
    fog: Optional[FogOfWar] = None
    sound: Any = None
    atlas: Any = None
    tiles: dict = field(default_factory=dict)
    player: Any = None
    camera: tuple = (0, 0)
    render_offset: tuple = RENDER_OFFSET
    num_gold: int = 0
    num_silver: int = 0
    complete: bool = False
    time: float = 0.0

    def __post_init__(self):
        if self.fog is None:
            self.fog = FogOfWar(self.game_map.width, self.game_map.height)

    def say(self, speaker, message, color):
        """Queue a line of dialogue."""
        self.messages.add(speaker, message, color)

    def info(self, message):
        """Show a short message on the HUD."""
        self.hud.set_info_message(message)

    def play_sound(self, sound_id, channel=-1):
        """Play a sound effect if sound is available."""
        if self.sound is not None:
            self.sound.play(sound_id, channel)

    def image(self, filename, required=True):
        """Atlas image ``filename``, or None when no atlas is loaded."""
        if self.atlas is None:
            return None
        return self.atlas.get(filename, required)

    def light(self, src, vis_distance):
        """Light the cells ``src`` can see; the player's lantern lights dark floor."""
        has_lantern = src is self.player and bool(getattr(src, "has_lantern", False))
        self.fog.update(src, vis_distance, self.game_map, self.entities, has_lantern)

    def center_camera(self, x, y):
        """Point the camera at cell (x, y), kept inside the map."""
        cam_x = min(max(x - MAP_RENDER_WIDTH // 2, 0), self.game_map.width - MAP_RENDER_WIDTH)
        cam_y = min(max(y - MAP_RENDER_HEIGHT // 2, 0), self.game_map.height - MAP_RENDER_HEIGHT)
        self.camera = (cam_x, cam_y)