"""Unit tests for the collision & fragmentation engine."""

import math

import numpy as np
import pytest

from planetsim.core.bodies import Planet, PlanetConfig, Sun
from planetsim.core.collisions import CollisionEngine, CollisionReport, create_fragments
from planetsim.core.config import WorldConfig
from planetsim.core.registry import BodyRegistry


@pytest.fixture
def registry():
    return BodyRegistry(Sun(x=0.0, y=0.0, mass=1000.0, radius=30.0))


@pytest.fixture
def engine(rng):
    return CollisionEngine(WorldConfig(), rng)


def planet_at(registry, x, y, mass=3.0, radius=5.0, is_fragment=False, **kwargs):
    return registry.add_planet(
        PlanetConfig(x=x, y=y, mass=mass, radius=radius, is_fragment=is_fragment, **kwargs)
    )


class TestCreateFragments:
    """Tests for create_fragments()."""

    @pytest.mark.parametrize(
        "mass, expected_pieces",
        [(0.4, 1), (1.0, 1), (2.5, 3), (3.0, 3), (7.9, 8), (10.0, 10), (15.0, 10), (250.0, 10)],
    )
    def test_piece_count(self, rng, mass, expected_pieces):
        parent = Planet(0, PlanetConfig(x=0.0, y=0.0, mass=mass, radius=2.0 + mass))
        fragments = create_fragments(parent, rng)
        assert len(fragments) == expected_pieces == min(10, math.ceil(mass))

    @pytest.mark.parametrize("mass", [0.7, 3.3, 6.0, 42.0])
    def test_mass_is_conserved(self, rng, mass):
        parent = Planet(0, PlanetConfig(x=0.0, y=0.0, mass=mass, radius=2.0 + mass))
        fragments = create_fragments(parent, rng)
        assert sum(f.mass for f in fragments) == pytest.approx(mass)

    def test_fragment_properties(self, rng):
        parent = Planet(
            0,
            PlanetConfig(x=12.0, y=-7.0, vx=0.3, vy=-0.2, mass=4.0, radius=6.0, color="teal"),
        )
        for frag in create_fragments(parent, rng):
            assert frag.is_fragment
            assert frag.mass == pytest.approx(1.0)
            assert frag.radius == pytest.approx(2.0)  # 1 + mass
            assert (frag.x, frag.y) == (12.0, -7.0)
            assert frag.color == "teal"
            kick = np.hypot(frag.vx - 0.3, frag.vy + 0.2)
            assert kick == pytest.approx(1.0)

    def test_kick_speed_and_radius_offset(self, rng):
        parent = Planet(0, PlanetConfig(x=0.0, y=0.0, mass=2.0, radius=4.0))
        fragments = create_fragments(parent, rng, kick_speed=2.5, radius_offset=0.5)
        for frag in fragments:
            assert np.hypot(frag.vx, frag.vy) == pytest.approx(2.5)
            assert frag.radius == pytest.approx(1.5)

    def test_max_pieces(self, rng):
        parent = Planet(0, PlanetConfig(x=0.0, y=0.0, mass=9.0, radius=11.0))
        assert len(create_fragments(parent, rng, max_pieces=4)) == 4

    def test_independent_directions(self, rng):
        parent = Planet(0, PlanetConfig(x=0.0, y=0.0, mass=10.0, radius=12.0))
        directions = {(round(f.vx, 9), round(f.vy, 9)) for f in create_fragments(parent, rng)}
        assert len(directions) == 10


class TestSunImpacts:
    """Planets closer to the sun than the radius sum are absorbed."""

    def test_planet_absorbed_without_fragments(self, registry, engine):
        victim = planet_at(registry, 20.0, 0.0)
        survivor = planet_at(registry, 200.0, 0.0)

        report = engine.resolve(registry)

        assert victim.is_destroyed
        assert registry.planets == (survivor,)
        assert report.sun_impacts == [victim.id]
        assert report.fragments_spawned == 0
        assert report.collisions == []

    def test_fragment_absorbed(self, registry, engine):
        frag = planet_at(registry, 0.0, 25.0, mass=0.5, radius=1.5, is_fragment=True)
        report = engine.resolve(registry)
        assert frag.is_destroyed
        assert len(registry) == 0
        assert report.sun_impacts == [frag.id]

    def test_boundary_is_not_an_impact(self, registry, engine):
        # distance == radius sum exactly
        planet = planet_at(registry, 35.0, 0.0, radius=5.0)
        engine.resolve(registry)
        assert not planet.is_destroyed

    def test_sun_beats_planet_collision(self, registry, engine):
        """A planet inside the sun is absorbed even if it also touches another."""
        a = planet_at(registry, 25.0, 0.0)
        b = planet_at(registry, 29.0, 0.0)
        report = engine.resolve(registry)
        assert a.is_destroyed and b.is_destroyed
        assert report.sun_impacts == [a.id, b.id]
        assert report.fragments_spawned == 0


class TestPlanetCollisions:
    """Non-fragment planets shatter on contact."""

    def test_two_planets_shatter(self, registry, engine):
        a = planet_at(registry, 200.0, 0.0, mass=3.0, radius=5.0)
        b = planet_at(registry, 203.0, 0.0, mass=4.0, radius=6.0)

        report = engine.resolve(registry)

        assert a.is_destroyed and b.is_destroyed
        assert report.collisions == [(a.id, b.id)]
        assert report.fragments_spawned == 3 + 4
        assert len(registry) == 7
        assert all(p.is_fragment for p in registry)
        assert sum(p.mass for p in registry) == pytest.approx(7.0)

    def test_fragments_follow_parent_order(self, registry, engine):
        a = planet_at(registry, 200.0, 0.0, mass=2.0, color="red")
        b = planet_at(registry, 203.0, 0.0, mass=3.0, color="blue")
        engine.resolve(registry)
        assert [p.color for p in registry] == ["red"] * 2 + ["blue"] * 3

    def test_fragments_appended_after_survivors(self, registry, engine):
        planet_at(registry, 200.0, 0.0)
        planet_at(registry, 203.0, 0.0)
        bystander = planet_at(registry, -200.0, 0.0)

        engine.resolve(registry)

        assert registry.planets[0] is bystander
        assert all(p.is_fragment for p in registry.planets[1:])

    def test_new_fragments_get_fresh_ids(self, registry, engine):
        a = planet_at(registry, 200.0, 0.0)
        b = planet_at(registry, 203.0, 0.0)
        engine.resolve(registry)
        ids = [p.id for p in registry]
        assert len(set(ids)) == len(ids)
        assert min(ids) > max(a.id, b.id)

    def test_first_collision_wins(self, registry, engine):
        """Three overlapping planets: the first pair shatters, the third survives the frame."""
        p = planet_at(registry, 200.0, 0.0)
        q = planet_at(registry, 201.0, 0.0)
        r = planet_at(registry, 202.0, 0.0)

        report = engine.resolve(registry)

        assert report.collisions == [(p.id, q.id)]
        assert not r.is_destroyed
        assert registry.planets[0] is r
        assert len(registry) == 1 + 3 + 3

    def test_distant_planets_untouched(self, registry, engine):
        a = planet_at(registry, 200.0, 0.0)
        b = planet_at(registry, 220.0, 0.0)
        report = engine.resolve(registry)
        assert not report
        assert registry.planets == (a, b)


class TestFragmentsAreInert:
    """Fragments never collide with planets or with each other."""

    def test_fragment_and_planet_overlap(self, registry, engine):
        planet = planet_at(registry, 200.0, 0.0)
        frag = planet_at(registry, 200.0, 0.0, mass=0.5, radius=1.5, is_fragment=True)
        report = engine.resolve(registry)
        assert not report
        assert registry.planets == (planet, frag)

    def test_fragment_listed_first(self, registry, engine):
        frag = planet_at(registry, 200.0, 0.0, mass=0.5, radius=1.5, is_fragment=True)
        planet = planet_at(registry, 200.0, 0.0)
        engine.resolve(registry)
        assert registry.planets == (frag, planet)

    def test_two_fragments_overlap(self, registry, engine):
        for _ in range(2):
            planet_at(registry, 200.0, 0.0, mass=0.5, radius=1.5, is_fragment=True)
        report = engine.resolve(registry)
        assert report.collisions == []
        assert len(registry) == 2


class TestCollisionReport:
    """Tests for CollisionReport."""

    def test_empty_report_is_falsy(self):
        report = CollisionReport()
        assert not report
        assert report.n_destroyed == 0
