import pygame

from kara.textures import TextureCache, to_texture


def test_load_caches_by_name():
    calls = []

    def loader(name):
        calls.append(name)
        return ("texture", name)

    cache = TextureCache(loader)
    first = cache.load("gfx/a.png")
    second = cache.load("gfx/a.png")
    assert first is second
    assert calls == ["gfx/a.png"]
    assert len(cache) == 1


def test_distinct_names_load_separately():
    cache = TextureCache(lambda name: name.upper())
    assert cache.load("a") == "A"
    assert cache.load("b") == "B"
    assert len(cache) == 2


def test_default_loader_reads_image(tmp_path):
    path = tmp_path / "img.bmp"
    pygame.image.save(pygame.Surface((6, 3)), str(path))
    cache = TextureCache()
    assert cache.load(str(path)).get_size() == (6, 3)


def test_to_texture_without_display_keeps_surface():
    surface = pygame.Surface((4, 4))
    assert to_texture(surface) is surface