from mazeman.entity import Entity, Shadow, color_vector, default_shadows
from mazeman.geometry import Rect


def test_color_vector():
    assert color_vector(237, 234, 42) == [237, 234, 42]


def test_entity_color():
    player = Entity(380.0, 670.0, 20.0, 237, 234, 42)
    assert player.color == (237, 234, 42)
    assert (player.x, player.y, player.size) == (380.0, 670.0, 20.0)


def test_shadow_bounds():
    shadow = Shadow(400.0, 690.0, False, False, True, True, 0)
    assert shadow.bounds() == Rect(400.0, 690.0, 10.0, 10.0)
    assert shadow.bounds().width == shadow.size


def test_default_shadow_count_and_first():
    shadows = default_shadows()
    assert len(shadows) == 19
    first = shadows[0]
    assert (first.x, first.y, first.shadow_id) == (400.0, 690.0, 0)
    assert (first.up, first.down, first.left, first.right) == (False, False, True, True)


def test_last_shadow_repeats_ninth():
    shadows = default_shadows()
    assert shadows[-1] == shadows[9]
    assert shadows[-1].shadow_id == 9


def test_start_box_touches_first_shadow():
    start_box = Rect(380.0 + 20, 670.0 + 20, 5.0, 5.0)
    hits = [s.shadow_id for s in default_shadows() if start_box.intersects(s.bounds())]
    assert hits == [0]


def test_crossroad_allows_every_direction():
    crossroad = next(s for s in default_shadows() if s.shadow_id == 6)
    assert (crossroad.x, crossroad.y) == (179.0, 250.0)
    assert (crossroad.up, crossroad.down, crossroad.left, crossroad.right) == (
        True,
        True,
        True,
        True,
    )