"""Shared test fixtures."""

import io
import logging

import pytest
from medlab import CommandWriter, TurnReader

from agents.researcher.agent import ResearcherBot


@pytest.fixture
def commands() -> io.StringIO:
    """Captures everything the bot writes as commands."""
    return io.StringIO()


@pytest.fixture
def diagnostics() -> logging.Logger:
    return logging.getLogger("tests.diagnostics")


@pytest.fixture
def make_bot(commands: io.StringIO, diagnostics: logging.Logger):
    """Build a ResearcherBot reading the given transcript text."""

    def _make(transcript: str = "") -> ResearcherBot:
        return ResearcherBot(
            source=TurnReader(io.StringIO(transcript)),
            sink=CommandWriter(commands),
            diagnostics=diagnostics,
        )

    return _make
