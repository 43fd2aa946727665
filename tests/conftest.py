"""Shared test fixtures."""

from __future__ import annotations

import math

import pytest

from movement.utils.point import Point


def _pts(pairs: list[tuple[int, int]]) -> list[Point]:
    return [Point(x, y) for x, y in pairs]


def regular_polygon(cx: int, cy: int, radius: float, n: int) -> list[Point]:
    """Vertices of a regular n-gon, rounded to the pixel grid."""
    return [
        Point(
            round(cx + radius * math.cos(2 * math.pi * i / n)),
            round(cy + radius * math.sin(2 * math.pi * i / n)),
        )
        for i in range(n)
    ]


def sampled_ellipse(cx: int, cy: int, rx: float, ry: float, n: int) -> list[Point]:
    """n samples of an axis-aligned ellipse, rounded to the pixel grid."""
    return [
        Point(
            round(cx + rx * math.cos(2 * math.pi * i / n)),
            round(cy + ry * math.sin(2 * math.pi * i / n)),
        )
        for i in range(n)
    ]


# Horizontal stroke drawn right to left
LINE_TRACE = [Point(x, 919) for x in range(800, 399, -10)]

CIRCLE_TRACE = regular_polygon(400, 300, 100, 24)

ELLIPSE_TRACE = sampled_ellipse(500, 500, 200, 100, 40)

# 12-gon of radius 100 with every fourth vertex pushed out to radius 200:
# exactly 9 of 12 samples sit inside the band (75%).
CIRCLE_BOUNDARY_TRACE = _pts([
    (600, 300), (487, 350), (450, 387), (400, 400), (300, 473), (313, 350),
    (300, 300), (313, 250), (300, 127), (400, 200), (450, 213), (487, 250),
])

# Endpoints are the diameter; 3 of 4 samples lie on the line (75%).
LINE_BOUNDARY_TRACE = _pts([(0, 0), (30, 0), (60, 40), (100, 0)])

ZIGZAG_TRACE = [Point(i * 50, (i % 2) * 80) for i in range(9)]

SCRIBBLE_TRACE = _pts([
    (120, 340), (180, 260), (260, 330), (210, 420), (140, 380), (300, 250), (360, 390),
    (250, 460), (330, 300), (420, 350), (380, 240), (290, 180), (450, 420),
])

CHECKMARK_TRACE = _pts([
    (100, 300), (120, 320), (140, 340), (160, 360), (180, 340), (200, 300),
    (220, 260), (240, 220), (260, 180), (280, 140), (300, 100),
])

LOOPBACK_TRACE = _pts([
    (100, 100), (200, 110), (300, 100), (400, 120), (300, 140),
    (200, 130), (150, 200), (260, 260), (380, 240),
])

SPIRAL_TRACE = _pts([
    (400, 400), (408, 403), (413, 411), (413, 422), (406, 433), (393, 441), (375, 444),
    (355, 438), (337, 423), (324, 399), (321, 371), (330, 340), (351, 312), (382, 292),
    (422, 284), (465, 292), (504, 315), (535, 353), (551, 403), (549, 457), (527, 510),
    (485, 554), (428, 583), (362, 590), (295, 572), (236, 531), (193, 470), (173, 394),
    (181, 314), (218, 238), (280, 178), (362, 142), (455, 137), (546, 164), (625, 223),
    (679, 309), (702, 410), (688, 516), (637, 614), (553, 689), (446, 733),
])

SQUIGGLE_TRACE = [Point(100 + i * 12, round(300 + 60 * math.sin(i * 0.9))) for i in range(31)]

NEGATIVE_TRACES = {
    "zigzag": ZIGZAG_TRACE,
    "scribble": SCRIBBLE_TRACE,
    "checkmark": CHECKMARK_TRACE,
    "loopback": LOOPBACK_TRACE,
    "spiral": SPIRAL_TRACE,
    "squiggle": SQUIGGLE_TRACE,
}


@pytest.fixture
def circle_trace() -> list[Point]:
    return CIRCLE_TRACE


@pytest.fixture
def line_trace() -> list[Point]:
    return LINE_TRACE


@pytest.fixture
def ellipse_trace() -> list[Point]:
    return ELLIPSE_TRACE
