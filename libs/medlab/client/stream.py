"""Line-oriented game I/O — turn snapshots in, commands out."""

import logging
from collections.abc import Iterator
from typing import TextIO

from medlab.agent.actions import Action
from medlab.helpers.factory import (
    format_action,
    parse_agent_line,
    parse_available_line,
    parse_project,
    parse_task_line,
)
from medlab.models.snapshot import Project, WorldSnapshot

logger = logging.getLogger(__name__)


class TurnReader:
    """Reads the game's input protocol from a text stream.

    Usage:
        reader = TurnReader(sys.stdin)
        reader.read_projects()
        for snapshot in reader:
            ...
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._projects: list[Project] | None = None

    @property
    def projects(self) -> list[Project]:
        """Science projects announced at start-up (empty before read_projects())."""
        return list(self._projects or [])

    def _readline(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError("Input closed")
        return line.strip()

    def read_projects(self) -> list[Project]:
        """Consume the one-off project block. Safe to call more than once."""
        if self._projects is None:
            count = int(self._readline())
            self._projects = [parse_project(self._readline()) for _ in range(count)]
            logger.debug("Read %d science projects", count)
        return self.projects

    def read_turn(self) -> WorldSnapshot:
        """Block until one full turn is read and return its snapshot.

        Raises:
            EOFError: If the input ends, including mid-turn.
            MalformedSnapshot: On an unknown module or owner token.
            ValueError: On malformed framing.
        """
        self.read_projects()
        me = parse_agent_line(self._readline())
        opponent = parse_agent_line(self._readline())
        available = parse_available_line(self._readline())
        count = int(self._readline())
        tasks = [parse_task_line(self._readline()) for _ in range(count)]
        return WorldSnapshot.create(me=me, opponent=opponent, available=available, tasks=tasks)

    def __iter__(self) -> Iterator[WorldSnapshot]:
        while True:
            try:
                snapshot = self.read_turn()
            except EOFError:
                logger.info("Input closed, no more turns")
                return
            yield snapshot


class CommandWriter:
    """Writes exactly one command line per action and flushes."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def send(self, action: Action) -> str:
        line = format_action(action)
        self._stream.write(line + "\n")
        self._stream.flush()
        return line
