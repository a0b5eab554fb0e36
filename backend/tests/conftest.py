"""Shared test fixtures."""

from __future__ import annotations

import pytest

from snowchart.engine.context import Frame, Mode, ScoreSet

# value=3, future=7, past=5, health=7, dividend=1 -> aggregate 23 of 35
SAMPLE_SCORES = {"value": 3, "future": 7, "past": 5, "health": 7, "dividend": 1}

ZERO_SCORES = {"value": 0, "future": 0, "past": 0, "health": 0, "dividend": 0}

FULL_SCORES = {"value": 7, "future": 7, "past": 7, "health": 7, "dividend": 7}

CANVAS = 400.0
# min(400, 400) / 2 - 50
MAX_RADIUS = 150.0


@pytest.fixture
def sample_scores() -> ScoreSet:
    return ScoreSet.from_mapping(SAMPLE_SCORES)


@pytest.fixture
def overview_frame(sample_scores: ScoreSet) -> Frame:
    return Frame(scores=sample_scores, mode=Mode.overview(), width=CANVAS, height=CANVAS)


@pytest.fixture
def focus_frame(sample_scores: ScoreSet) -> Frame:
    return Frame(scores=sample_scores, mode=Mode.focused("past"), width=CANVAS, height=CANVAS)
