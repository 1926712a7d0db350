from lowengine.sprite import Sprite


class _Texture:
    def __init__(self, width, height):
        self.size = (width, height)


def test_rect_defaults_to_whole_texture():
    sprite = Sprite(_Texture(32, 16))
    assert sprite.texture_rect == (0, 0, 32, 16)


def test_explicit_rect_is_kept():
    sprite = Sprite(_Texture(32, 16), (4, 4, 8, 8))
    assert sprite.texture_rect == (4, 4, 8, 8)


def test_defaults_without_texture():
    sprite = Sprite()
    assert sprite.texture_rect == (0, 0, 0, 0)
    assert sprite.layer == 0
    assert sprite.scale == (1.0, 1.0)


def test_copy_is_independent_and_shares_texture():
    texture = _Texture(10, 10)
    sprite = Sprite(texture, layer=3, position=(1.0, 2.0))
    duplicate = sprite.copy()
    assert duplicate == sprite
    assert duplicate.texture is texture
    duplicate.layer = 7
    duplicate.position = (5.0, 5.0)
    assert sprite.layer == 3
    assert sprite.position == (1.0, 2.0)