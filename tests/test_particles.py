import pygame
import pytest

from neonpong.particles import ParticleSystem

Vec2 = pygame.math.Vector2
CYAN = (0, 255, 255)


@pytest.fixture
def system(config, rng):
    return ParticleSystem(config, rng)


def test_spawn_adds_exactly_count(system):
    system.spawn((100, 50), CYAN, 10)
    assert len(system) == 10
    for p in system.particles:
        assert p.pos == Vec2(100, 50)
        assert p.life == 1.0
        assert p.color == CYAN
        assert -5 <= p.vel.x <= 5 and -5 <= p.vel.y <= 5
        assert 1 <= p.radius <= 4


def test_particles_get_independent_positions(system):
    origin = Vec2(10, 10)
    system.spawn(origin, CYAN, 3)
    origin.x = 999
    system.advance()
    positions = [tuple(p.pos) for p in system.particles]
    assert all(x != 999 for x, _ in positions)
    assert len(set(positions)) == 3


def test_advance_moves_and_ages(system):
    system.spawn((0, 0), CYAN, 1)
    p = system.particles[0]
    vel = Vec2(p.vel)
    system.advance()
    assert p.pos == vel
    assert p.life == pytest.approx(0.98)


def test_burst_dies_after_fifty_steps(system):
    system.spawn((0, 0), CYAN, 10)
    for _ in range(49):
        system.advance()
    assert len(system) == 10
    system.advance()
    assert len(system) == 0


def test_bursts_age_independently(system):
    system.spawn((0, 0), CYAN, 10)
    for _ in range(25):
        system.advance()
    system.spawn((0, 0), CYAN, 20)
    for _ in range(25):
        system.advance()
    assert len(system) == 20


def test_render_uses_life_as_alpha(system, surface):
    system.spawn((5, 5), CYAN, 4)
    system.advance()
    system.render(surface)
    circles = surface.named("fill_circle")
    assert len(circles) == 4
    for _, center, radius, color, alpha in circles:
        assert color == CYAN
        assert alpha == pytest.approx(0.98)


def test_clear(system):
    system.spawn((0, 0), CYAN, 5)
    system.clear()
    assert len(system) == 0
