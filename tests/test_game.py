from mazeman.entity import Shadow, default_shadows
from mazeman.game import Direction, Player, allowed_moves
from mazeman.geometry import Rect


def test_allowed_moves_at_start_junction():
    box = Rect(400.0, 690.0, 5.0, 5.0)
    assert allowed_moves(box, default_shadows()) == frozenset(
        {Direction.LEFT, Direction.RIGHT}
    )


def test_allowed_moves_away_from_junctions():
    box = Rect(600.0, 20.0, 5.0, 5.0)
    assert allowed_moves(box, default_shadows()) == frozenset()


def test_player_starts_moving_left():
    player = Player()
    assert player.update({Direction.LEFT}, default_shadows()) is Direction.LEFT
    assert player.x == 380.0 - player.speed
    assert player.y == 670.0


def test_player_cannot_turn_where_not_allowed():
    player = Player()
    assert player.update({Direction.UP}, default_shadows()) is Direction.NONE
    assert (player.x, player.y) == (380.0, 670.0)
    assert player.intent is Direction.UP


def test_player_keeps_moving_without_keys():
    player = Player()
    shadows = default_shadows()
    player.update({Direction.LEFT}, shadows)
    for _ in range(10):
        player.update(set(), shadows)
    assert player.direction is Direction.LEFT
    assert player.x == 380.0 - 11 * player.speed


def test_reverse_allowed_outside_junction():
    player = Player()
    shadows = default_shadows()
    player.update({Direction.LEFT}, shadows)
    for _ in range(10):
        player.update(set(), shadows)
    assert allowed_moves(player.bounding_box, shadows) == frozenset()
    before = player.x
    assert player.update({Direction.RIGHT}, shadows) is Direction.RIGHT
    assert player.x == before + player.speed


def test_latched_turn_taken_at_junction():
    shadows = [Shadow(115.0, 120.0, True, False, False, False, 0)]
    player = Player(x=110.0, y=100.0, direction=Direction.LEFT)
    player.update({Direction.UP}, shadows)
    assert player.direction is Direction.LEFT
    for _ in range(20):
        if player.update(set(), shadows) is Direction.UP:
            break
    assert player.direction is Direction.UP
    assert player.y < 100.0


def test_player_stops_at_left_edge():
    player = Player(x=-1.0, y=50.0, direction=Direction.LEFT)
    assert player.update(set(), []) is Direction.NONE
    assert player.x == -1.0


def test_player_stops_at_right_limit():
    player = Player(x=701.0, y=50.0, direction=Direction.RIGHT)
    assert player.update(set(), []) is Direction.NONE
    assert player.x == 701.0


def test_player_moves_down_until_limit():
    player = Player(x=50.0, y=698.0, direction=Direction.DOWN)
    player.update(set(), [])
    assert player.y == 698.0 + player.speed
    player.update(set(), [])
    player.update(set(), [])
    assert player.direction is Direction.NONE
    assert player.y > 700.0