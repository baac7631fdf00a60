"""Queue of dialogue boxes typed out one character at a time."""

import math
from collections import deque
from dataclasses import dataclass

from .defs import MAX_LINE_LENGTH, MAX_NAME_LENGTH, SCREEN_WIDTH, Key, SoundId, TextAlign

BOX_WIDTH = 600
WHITE = (255, 255, 255)


@dataclass
class MessageBox:
    """One line of dialogue."""

    speaker: str
    message: str
    color: tuple = (0, 0, 0)


class MessageQueue:
    """Dialogue waiting to be shown; the first entry is on screen."""

    def __init__(self, arrow=None):
        self.arrow = arrow
        self._queue = deque()
        self._timer = 1.0
        self._text_index = 0
        self._arrow_pulse = 0.0

    def add(self, speaker, message, color):
        """Append a message to the end of the queue."""
        self._queue.append(
            MessageBox(
                speaker[: MAX_NAME_LENGTH - 1],
                message[: MAX_LINE_LENGTH - 1],
                tuple(int(c) for c in color[:3]),
            )
        )

    def __len__(self):
        return len(self._queue)

    def __bool__(self):
        return bool(self._queue)

    def __iter__(self):
        return iter(self._queue)

    @property
    def current(self):
        """The message on screen, or None."""
        return self._queue[0] if self._queue else None

    @property
    def visible_text(self):
        """The part of the current message typed out so far."""
        msg = self.current
        if msg is None:
            return ""
        return msg.message[: max(self._text_index - 1, 0)]

    def update(self, delta_time, keyboard, sound=None):
        """Type out the current message; space or return dismisses it."""
        msg = self.current
        if msg is None:
            return

        self._arrow_pulse += 0.15 * delta_time
        self._timer = max(self._timer - delta_time, 0)

        if self._timer == 0:
            length = len(msg.message) + 1
            self._text_index = min(self._text_index + 1, length)
            self._timer = 1.0
            if sound is not None and self._text_index < length and self._text_index % 4 == 0:
                sound.play(SoundId.CHAT, 0)

        if keyboard.consume(Key.SPACE, Key.RETURN):
            self._queue.popleft()
            self._timer = 1.0
            self._text_index = 0

    def draw(self, renderer, font):
        """Draw the current message box, if any."""
        msg = self.current
        if msg is None:
            return

        w = BOX_WIDTH
        h = font.wrapped_height(msg.message, w)
        x = (SCREEN_WIDTH - w) // 2
        y = 80

        x -= 10
        w += 20
        y -= 5
        h += 5

        renderer.draw_rect(x, y, w, h, (*msg.color, 192))
        renderer.draw_outline_rect(x, y, w, h, (255, 255, 255, 128))

        font.draw(renderer, msg.speaker, x, y - 45, WHITE, TextAlign.LEFT)
        font.draw(renderer, self.visible_text, x + 10, y, WHITE, TextAlign.LEFT, BOX_WIDTH)

        if len(self._queue) > 1 and self.arrow is not None:
            arrow_y = int(y + h + math.sin(self._arrow_pulse) * 8)
            renderer.blit_atlas_image(self.arrow, x + w, arrow_y, True)