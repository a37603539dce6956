"""Shared pytest fixtures for the whiteboard test suite.

Fixtures:
    circle_stroke: 40 points evenly spaced on a circle of radius 50 at (100, 100)
    rectangle_stroke: points traced along the border of an 80x60 box at the origin
    scribble_stroke: zig-zag around the center of a 100x100 box with a few
        outliers at the box extremes
"""

import math
import os

import pytest

# pygame must not open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


def make_circle(cx=100.0, cy=100.0, radius=50.0, n=40, sweep=2 * math.pi):
    """Points on a circle, counter-clockwise from angle 0."""
    step = sweep / n if sweep >= 2 * math.pi else sweep / (n - 1)
    return [(cx + radius * math.cos(i * step), cy + radius * math.sin(i * step))
            for i in range(n)]


def make_rectangle(x=0.0, y=0.0, width=80.0, height=60.0, step=10.0, sides=4):
    """Points along the border, clockwise from the top-left corner."""
    points = []
    nx, ny = int(width / step), int(height / step)
    points += [(x + i * step, y) for i in range(nx)]
    points += [(x + width, y + j * step) for j in range(ny)]
    if sides == 3:
        points += [(x + width - i * step, y + height) for i in range(nx + 1)]
        return points
    points += [(x + width - i * step, y + height) for i in range(nx)]
    points += [(x, y + height - j * step) for j in range(ny)]
    return points


@pytest.fixture
def circle_stroke():
    return make_circle()


@pytest.fixture
def rectangle_stroke():
    return make_rectangle()


@pytest.fixture
def scribble_stroke():
    head = [(50 + (3 if k % 2 else -3), 45 + k) for k in range(10)]
    extremes = [(0, 50), (50, 0), (100, 50), (50, 100)]
    tail = [(50 + (3 if k % 2 else -3), 55 - k) for k in range(10)]
    return head + extremes + tail
