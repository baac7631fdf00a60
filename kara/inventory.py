"""The prisoner's carried items and the screen for managing them."""

import math

from .defs import NUM_INVENTORY_SLOTS, SCREEN_HEIGHT, SCREEN_WIDTH, Key, TextAlign

WHITE = (255, 255, 255)
GREY = (160, 160, 160)
DIMMED = (190, 190, 190)


class Inventory:
    """A fixed number of slots, each holding one entity or None."""

    def __init__(self, size=NUM_INVENTORY_SLOTS):
        self._slots = [None] * size

    def __iter__(self):
        return iter(list(self._slots))

    def __len__(self):
        return len(self._slots)

    def __getitem__(self, index):
        return self._slots[index]

    def add(self, entity, entities=None):
        """Put ``entity`` in the first free slot; return False when full."""
        for index, slot in enumerate(self._slots):
            if slot is None:
                self._slots[index] = entity
                if entities is not None:
                    entities.remove(entity)
                return True
        return False

    def has(self, name):
        """True if an item called ``name`` is carried."""
        return any(slot is not None and slot.name == name for slot in self._slots)

    def remove(self, name, entities=None):
        """Use up the first item called ``name``; return it, or None if absent.

        The item is marked dead and handed back to ``entities`` to be cleared away.
        """
        for index, slot in enumerate(self._slots):
            if slot is not None and slot.name == name:
                self._slots[index] = None
                slot.alive = False
                if entities is not None:
                    entities.add(slot)
                return slot
        return None

    def drop(self, slot, x, y, entities=None):
        """Place the item in ``slot`` on cell (x, y); return it, or None if empty."""
        entity = self._slots[slot]
        if entity is None:
            return None
        entity.x = x
        entity.y = y
        if entities is not None:
            entities.add(entity)
        self._slots[slot] = None
        return entity

    def has_lantern(self):
        return self.has("Lantern")

    def has_dagger(self):
        return self.has("Dagger")


class InventoryView:
    """Scene for choosing an inventory slot and dropping its item."""

    def __init__(self, app, world, back, arrow=None, font=None):
        self.app = app
        self.world = world
        self.back = back
        self.arrow = arrow
        self.font = font
        self.selected = 0
        self.arrow_pulse = 0.0
        player = world.player
        self.can_drop = not any(
            e is not player and e.x == player.x and e.y == player.y for e in world.entities
        )

    def cycle(self, direction):
        """Move the selection up or down, wrapping round."""
        size = len(self.world.player.inventory)
        self.selected += direction
        self.arrow_pulse = 0.0
        if self.selected < 0:
            self.selected = size - 1
        if self.selected >= size:
            self.selected = 0

    def logic(self):
        keyboard = self.app.keyboard
        self.arrow_pulse += 0.15 * self.app.delta_time

        if keyboard.consume(Key.W, Key.UP):
            self.cycle(-1)

        if keyboard.consume(Key.S, Key.DOWN):
            self.cycle(1)

        if keyboard.consume(Key.RETURN) and self.can_drop:
            player = self.world.player
            player.inventory.drop(self.selected, player.x, player.y, self.world.entities)
            self.back()

        if keyboard.consume(Key.TAB, Key.ESCAPE):
            self.back()

    def draw(self, renderer):
        world = self.world
        world.game_map.draw(renderer, world.tiles, world.camera, world.render_offset)
        world.entities.draw(renderer, world.camera, world.render_offset)
        renderer.draw_rect(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, (0, 0, 0, 128))

        self._draw_slots(renderer)

        if self.font is None:
            return
        if self.can_drop:
            self.font.draw(
                renderer, "[ENTER] Drop item",
                SCREEN_WIDTH // 2, SCREEN_HEIGHT - 100, WHITE, TextAlign.CENTER,
            )
        else:
            self.font.draw(
                renderer, "Can't drop anything here",
                SCREEN_WIDTH // 2, SCREEN_HEIGHT - 100, DIMMED, TextAlign.CENTER,
            )

    def _draw_slots(self, renderer):
        for index, item in enumerate(self.world.player.inventory):
            x = SCREEN_WIDTH // 2 - 100
            y = 250 + index * 128

            renderer.draw_rect(x - 64, y - 48, 350, 96, (0, 0, 0, 255))
            renderer.draw_outline_rect(x - 64, y - 48, 350, 96, (255, 255, 255, 255))

            if item is not None:
                if item.texture is not None:
                    renderer.blit_atlas_image_scaled(item.texture, x, y, 64, 64, True)
                if self.font is not None:
                    self.font.draw(renderer, item.name, x + 64, y - 22, WHITE, TextAlign.LEFT)
            elif self.font is not None:
                self.font.draw(renderer, "(empty)", x + 64, y - 22, GREY, TextAlign.LEFT)

            if index == self.selected and self.arrow is not None:
                arrow_x = int((x - 100) + math.sin(self.arrow_pulse) * 16)
                renderer.blit_atlas_image(self.arrow, arrow_x, y, True)