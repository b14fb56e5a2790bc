import pytest

from termvaders.entities import (
    BULLET_MAX_Y,
    INITIAL_LIVES,
    PLAYER_MAX_X,
    Bullet,
    Direction,
    GameObject,
    Player,
)


def test_game_object_defaults():
    obj = GameObject()
    assert (obj.x, obj.y, obj.name) == (0, 0, " ")
    assert str(obj) == " "


def test_game_object_move_to():
    obj = GameObject(2, 3)
    obj.move_to(7, 9)
    assert (obj.x, obj.y) == (7, 9)


def test_game_object_str_uses_name():
    obj = GameObject(1, 1, "#")
    assert str(obj) == "#"


def test_bullet_defaults():
    bullet = Bullet()
    assert bullet.name == "*"
    assert str(bullet) == "*"
    assert bullet.direction is Direction.UP
    assert (bullet.x, bullet.y) == (0, 0)


def test_direction_values_drive_bullet_movement():
    assert Direction(1) is Direction.UP
    assert Direction(2) is Direction.DOWN

    up = Bullet(0, 5, Direction(1))
    up.update()
    assert up.y == 4

    down = Bullet(0, 5, Direction(2))
    down.update()
    assert down.y == 6


def test_bullet_moves_up():
    start = 10
    bullet = Bullet(4, start, Direction.UP)
    bullet.update()
    assert (bullet.x, bullet.y) == (4, start - 1)


def test_bullet_stops_at_top():
    bullet = Bullet(4, 0, Direction.UP)
    bullet.update()
    assert bullet.y == 0


def test_bullet_moves_down():
    start = 5
    bullet = Bullet(3, start, Direction.DOWN)
    bullet.update()
    assert (bullet.x, bullet.y) == (3, start + 1)


def test_bullet_stops_at_bottom_limit():
    bullet = Bullet(3, BULLET_MAX_Y, Direction.DOWN)
    bullet.update()
    assert bullet.y == 27


def test_bullet_move_to_keeps_name():
    bullet = Bullet(1, 1, Direction.DOWN)
    bullet.move_to(6, 8)
    assert (bullet.x, bullet.y, bullet.name) == (6, 8, "*")


def test_player_defaults():
    player = Player(18, 19)
    assert player.name == "@"
    assert player.lives == INITIAL_LIVES == 3
    assert player.score == 0
    assert player.reload == 0
    assert (player.x, player.y) == (18, 19)


def test_player_go_left_and_right_round_trip():
    player = Player(10, 19)
    player.go_left()
    assert player.x == 10 - 1
    player.go_right()
    assert player.x == 10


def test_player_stops_at_left_edge():
    player = Player(0, 19)
    player.go_left()
    assert player.x == 0


def test_player_stops_at_right_edge():
    player = Player(PLAYER_MAX_X, 19)
    player.go_right()
    assert player.x == 35


def test_player_shoot_above_player():
    player = Player(12, 19)
    spot = player.shoot()
    assert (spot.x, spot.y) == (player.x, player.y - 1)
    assert spot.name == " "
    assert (player.x, player.y) == (12, 19)


def test_player_lose_life():
    player = Player()
    player.lose_life()
    assert player.lives == INITIAL_LIVES - 1


def test_player_add_score_accumulates():
    player = Player()
    player.add_score(10)
    player.add_score(5)
    assert player.score == 10 + 5


@pytest.mark.parametrize("start", [1, 4, 10])
def test_player_tick_reload_counts_down(start):
    player = Player()
    player.reload = start
    for _ in range(start):
        player.tick_reload()
    assert player.reload == 0