from types import SimpleNamespace

from kara.defs import FPS, TextAlign
from kara.hud import INFO_MESSAGE_LENGTH, Hud


class FakeRenderer:
    def __init__(self):
        self.blits = []

    def blit_atlas_image(self, image, x, y, center=False, flip=False, alpha=255):
        self.blits.append((image, x, y, center))


class FakeFont:
    def __init__(self):
        self.texts = []

    def draw(self, renderer, text, x, y, color, align=TextAlign.LEFT, max_width=0):
        self.texts.append((text, x, y, tuple(color), align))

    def drawn(self):
        return [entry[0] for entry in self.texts]


def make_prisoner(inventory=(None, None)):
    return SimpleNamespace(gold=5, silver=3, inventory=list(inventory), x=4, y=7)


def test_new_hud_shows_no_message():
    hud = Hud()
    assert not hud.info_visible
    assert hud.info_message == ""


def test_set_info_message_starts_timer():
    hud = Hud()
    hud.set_info_message("The door's locked.")
    assert hud.info_message == "The door's locked."
    assert hud.info_timer == FPS * 2.5
    assert hud.info_visible


def test_info_message_is_truncated():
    hud = Hud()
    hud.set_info_message("x" * 200)
    assert len(hud.info_message) == INFO_MESSAGE_LENGTH - 1


def test_update_counts_down_and_stops_at_zero():
    hud = Hud()
    hud.set_info_message("hello")
    hud.update(10)
    assert hud.info_timer == FPS * 2.5 - 10
    hud.update(10_000)
    assert hud.info_timer == 0
    assert not hud.info_visible


def test_draw_shows_cash():
    font = FakeFont()
    Hud().draw(FakeRenderer(), font, make_prisoner())
    assert "Gold: 5" in font.drawn()
    assert "Silver: 3" in font.drawn()


def test_draw_message_only_while_visible():
    hud = Hud()
    hud.set_info_message("Picked up a silver coin.")
    font = FakeFont()
    hud.draw(FakeRenderer(), font, make_prisoner())
    assert "Picked up a silver coin." in font.drawn()

    hud.update(10_000)
    font = FakeFont()
    hud.draw(FakeRenderer(), font, make_prisoner())
    assert "Picked up a silver coin." not in font.drawn()


def test_draw_inventory_frames_and_items():
    frame = object()
    item = SimpleNamespace(texture=object())
    renderer = FakeRenderer()
    Hud(frame).draw(renderer, FakeFont(), make_prisoner([None, item]))
    images = [entry[0] for entry in renderer.blits]
    assert images.count(frame) == 2
    assert images.count(item.texture) == 1
    frame_xs = [entry[1] for entry in renderer.blits if entry[0] is frame]
    item_x = next(entry[1] for entry in renderer.blits if entry[0] is item.texture)
    assert item_x == frame_xs[1]
    assert frame_xs[0] > frame_xs[1]


def test_location_is_hidden_by_default():
    font = FakeFont()
    Hud().draw(FakeRenderer(), font, make_prisoner())
    assert "4,7" not in font.drawn()