import pytest

from neonpong.physics import Playfield
from neonpong.starfield import Star, Starfield


@pytest.fixture
def playfield():
    return Playfield(800, 480)


@pytest.fixture
def starfield(playfield, config, rng):
    return Starfield(playfield, config, rng)


def test_populates_whole_surface(starfield):
    assert len(starfield.stars) == 200
    for star in starfield.stars:
        assert 0 <= star.x < 800
        assert 0 <= star.y < 480
        assert 1 <= star.radius <= 3
        assert 0.1 <= star.speed <= 0.6


def test_update_scrolls_left_by_own_speed(starfield):
    starfield.stars = [Star(100, 40, 1, 0.25), Star(300, 80, 2, 0.5)]
    starfield.update()
    assert [s.x for s in starfield.stars] == [99.75, 299.5]
    assert [s.y for s in starfield.stars] == [40, 80]


def test_wraps_to_right_edge_with_new_height(starfield):
    starfield.stars = [Star(0.05, 12, 1, 0.1)]
    starfield.update()
    star = starfield.stars[0]
    assert star.x == 800
    assert 0 <= star.y < 480


def test_star_at_exactly_zero_does_not_wrap(starfield):
    starfield.stars = [Star(0.5, 12, 1, 0.5)]
    starfield.update()
    assert starfield.stars[0].x == 0
    assert starfield.stars[0].y == 12


def test_wrap_follows_resized_playfield(starfield, playfield):
    playfield.width, playfield.height = 500, 300
    starfield.stars = [Star(0.05, 12, 1, 0.1)]
    starfield.update()
    assert starfield.stars[0].x == 500
    assert 0 <= starfield.stars[0].y < 300


def test_stars_never_removed(starfield):
    for _ in range(5000):
        starfield.update()
    assert len(starfield.stars) == 200
    assert all(0 <= s.x <= 800 for s in starfield.stars)


def test_render_draws_every_star(starfield, surface):
    starfield.render(surface)
    assert len(surface.named("fill_circle")) == 200
