"""Bitmap font built from a TrueType file, with word wrapping."""

import pygame

from .defs import TextAlign
from .textures import to_texture

FONT_SIZE = 48
FONT_TEXTURE_SIZE = 512
FIRST_GLYPH = " "
LAST_GLYPH = "z"
WHITE = (255, 255, 255)

_EMPTY = pygame.Rect(0, 0, 0, 0)


class Font:
    """A set of glyph rectangles on one texture."""

    def __init__(self, glyphs, texture):
        self.texture = texture
        self._glyphs = {}
        for key, rect in dict(glyphs).items():
            char = chr(key) if isinstance(key, int) else key
            self._glyphs[char] = pygame.Rect(rect)
        self._tinted = {}

    @classmethod
    def from_file(cls, filename="fonts/EnterCommand.ttf", size=FONT_SIZE):
        """Render the printable glyphs of a TrueType font into one texture."""
        if not pygame.font.get_init():
            pygame.font.init()
        ttf = pygame.font.Font(filename, size)
        surface = pygame.Surface((FONT_TEXTURE_SIZE, FONT_TEXTURE_SIZE), pygame.SRCALPHA)
        glyphs = {}
        x = y = 0
        for code in range(ord(FIRST_GLYPH), ord(LAST_GLYPH) + 1):
            char = chr(code)
            w, h = ttf.size(char)
            if x + w >= FONT_TEXTURE_SIZE:
                x = 0
                y += h + 1
                if y + h >= FONT_TEXTURE_SIZE:
                    raise RuntimeError(
                        f"Out of glyph space in {FONT_TEXTURE_SIZE}x{FONT_TEXTURE_SIZE} "
                        "font atlas texture map."
                    )
            surface.blit(ttf.render(char, True, WHITE), (x, y))
            glyphs[char] = pygame.Rect(x, y, w, h)
            x += w
        return cls(glyphs, to_texture(surface))

    def glyph(self, char):
        """Rectangle of ``char`` on the texture; empty if the font lacks it."""
        return self._glyphs.get(char, _EMPTY)

    @property
    def line_height(self):
        """Vertical step between wrapped lines."""
        return self.glyph(" ").h

    def text_size(self, text):
        """Return (width, height) of ``text`` drawn on one line."""
        rects = [self.glyph(char) for char in text]
        return sum(r.w for r in rects), max((r.h for r in rects), default=0)

    def wrap(self, text, max_width):
        """Split ``text`` into lines no wider than ``max_width`` where possible."""
        lines = []
        word = []
        line = ""
        word_width = line_width = 0
        new_line = False
        length = len(text)
        for pos, char in enumerate(text, 1):
            clear_word = False
            if not new_line:
                word_width += self.glyph(char).w
                if char != " ":
                    word.append(char)
            if char == " " or pos == length or new_line:
                if line_width + word_width >= max_width or new_line:
                    lines.append(line)
                    line = ""
                    line_width = 0
                    new_line = False
                clear_word = True
            following = text[pos] if pos < length else ""
            if following == "\n":
                new_line = True
                clear_word = True
            if clear_word:
                if line_width != 0:
                    line += " "
                line += "".join(word)
                line_width += word_width
                word = []
                word_width = 0
        lines.append(line)
        return lines

    def wrapped_height(self, text, max_width):
        """Height that ``text`` takes when wrapped to ``max_width``."""
        return len(self.wrap(text, max_width)) * self.line_height

    def draw(self, renderer, text, x, y, color, align=TextAlign.LEFT, max_width=0):
        """Draw ``text`` at (x, y), wrapping it when ``max_width`` is positive."""
        if max_width > 0:
            for line in self.wrap(text, max_width):
                self._draw_line(renderer, line, x, y, color, align)
                y += self.line_height
        else:
            self._draw_line(renderer, text, x, y, color, align)

    def _tinted_glyph(self, char, rect, color):
        key = (char, color)
        glyph = self._tinted.get(key)
        if glyph is None:
            glyph = self.texture.subsurface(rect).copy()
            glyph.fill((*color, 255), special_flags=pygame.BLEND_RGBA_MULT)
            self._tinted[key] = glyph
        return glyph

    def _draw_line(self, renderer, text, x, y, color, align):
        if align != TextAlign.LEFT:
            width, _ = self.text_size(text)
            if align == TextAlign.CENTER:
                x -= width // 2
            elif align == TextAlign.RIGHT:
                x -= width
        tint = tuple(int(c) for c in color[:3])
        for char in text:
            rect = self.glyph(char)
            if rect.w > 0 and rect.h > 0:
                renderer.surface.blit(self._tinted_glyph(char, rect, tint), (x, y))
            x += rect.w