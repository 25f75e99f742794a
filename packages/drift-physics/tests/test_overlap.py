"""Tests for circle and rectangle overlap predicates."""
from __future__ import annotations

from drift_physics.collision import beyond_rect, circle_breaches_rect, circles_overlap


# ── circles_overlap ──────────────────────────────────────────────


class TestCirclesOverlap:
    def test_no_overlap(self) -> None:
        assert not circles_overlap((0.0, 0.0), 1.0, (3.0, 0.0), 1.0)

    def test_exactly_touching_is_no_collision(self) -> None:
        assert not circles_overlap((0.0, 0.0), 18.0, (23.0, 0.0), 5.0)

    def test_just_inside_threshold_collides(self) -> None:
        eps = 1e-9
        assert circles_overlap((0.0, 0.0), 18.0, (23.0 - eps, 0.0), 5.0)

    def test_symmetric(self) -> None:
        pairs = [
            ((0.0, 0.0), 2.0, (1.0, 1.0), 1.0),
            ((10.0, 4.0), 1.0, (50.0, -3.0), 2.0),
            ((400.0, 300.0), 18.0, (405.0, 300.0), 5.0),
        ]
        for pa, ra, pb, rb in pairs:
            assert circles_overlap(pa, ra, pb, rb) == circles_overlap(pb, rb, pa, ra)

    def test_coincident_centers(self) -> None:
        assert circles_overlap((5.0, 5.0), 1.0, (5.0, 5.0), 1.0)


# ── circle_breaches_rect ─────────────────────────────────────────


class TestCircleBreachesRect:
    def test_center_of_arena_is_inside(self) -> None:
        assert not circle_breaches_rect((400.0, 300.0), 18.0, 800.0, 600.0)

    def test_on_inset_edge_is_inside(self) -> None:
        assert not circle_breaches_rect((782.0, 300.0), 18.0, 800.0, 600.0)
        assert not circle_breaches_rect((18.0, 18.0), 18.0, 800.0, 600.0)

    def test_each_side(self) -> None:
        assert circle_breaches_rect((17.0, 300.0), 18.0, 800.0, 600.0)
        assert circle_breaches_rect((783.0, 300.0), 18.0, 800.0, 600.0)
        assert circle_breaches_rect((400.0, 17.5), 18.0, 800.0, 600.0)
        assert circle_breaches_rect((400.0, 582.5), 18.0, 800.0, 600.0)


# ── beyond_rect ──────────────────────────────────────────────────


class TestBeyondRect:
    def test_inside(self) -> None:
        assert not beyond_rect((100.0, 100.0), 120.0, 800.0, 600.0)

    def test_outside_but_within_margin(self) -> None:
        assert not beyond_rect((-119.0, 300.0), 120.0, 800.0, 600.0)
        assert not beyond_rect((920.0, 300.0), 120.0, 800.0, 600.0)

    def test_past_margin(self) -> None:
        assert beyond_rect((-121.0, 300.0), 120.0, 800.0, 600.0)
        assert beyond_rect((921.0, 300.0), 120.0, 800.0, 600.0)
        assert beyond_rect((400.0, -121.0), 120.0, 800.0, 600.0)
        assert beyond_rect((400.0, 721.0), 120.0, 800.0, 600.0)
