"""Texture atlas: named sub-rectangles of one shared image."""

import json
from dataclasses import dataclass, field
from typing import Any

import pygame

from .defs import MAX_FILENAME_LENGTH
from .util import read_file


class AtlasError(Exception):
    """Raised when atlas data is broken or a required image is missing."""


@dataclass
class AtlasImage:
    """One named region of the atlas texture."""

    filename: str
    rect: pygame.Rect
    rotated: bool = False
    texture: Any = field(default=None, compare=False, repr=False)


def _field(node, key):
    if not isinstance(node, dict):
        raise AtlasError(f"atlas entry is not an object: {node!r}")
    lowered = key.lower()
    for name, value in node.items():
        if name.lower() == lowered:
            return value
    raise AtlasError(f"atlas entry lacks '{key}'")


def _as_int(value):
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return int(value)
    return 0


class Atlas:
    """Lookup of atlas images by filename."""

    def __init__(self, images, texture=None):
        self.texture = texture
        self._images = {}
        for image in images:
            if image.texture is None:
                image.texture = texture
            self._images.setdefault(image.filename, image)

    def __len__(self):
        return len(self._images)

    def __contains__(self, filename):
        return filename in self._images

    @classmethod
    def from_json(cls, text, texture=None):
        """Build an atlas from its JSON description."""
        try:
            root = json.loads(text)
        except json.JSONDecodeError as exc:
            raise AtlasError(f"failed to parse atlas JSON: {exc}") from exc

        if isinstance(root, dict):
            nodes = list(root.values())
        elif isinstance(root, list):
            nodes = root
        else:
            nodes = []

        images = []
        for node in nodes:
            filename = _field(node, "filename")
            if not isinstance(filename, str):
                raise AtlasError(f"atlas filename is not a string: {filename!r}")
            rect = pygame.Rect(
                _as_int(_field(node, "x")),
                _as_int(_field(node, "y")),
                _as_int(_field(node, "w")),
                _as_int(_field(node, "h")),
            )
            images.append(
                AtlasImage(
                    filename=filename[: MAX_FILENAME_LENGTH - 1],
                    rect=rect,
                    rotated=bool(_as_int(_field(node, "rotated"))),
                )
            )
        return cls(images, texture)

    @classmethod
    def load(cls, json_path="data/atlas.json", image_path="gfx/atlas.png"):
        """Load the atlas image and its JSON description from disk."""
        texture = pygame.image.load(image_path)
        return cls.from_json(read_file(json_path), texture)

    def get(self, filename, required=True):
        """Return the image called ``filename``; raise if required and absent."""
        image = self._images.get(filename)
        if image is None and required:
            raise AtlasError(f"No such atlas image '{filename}'")
        return image