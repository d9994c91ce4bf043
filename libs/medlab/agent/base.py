"""TurnBot — base class for robots playing the turn-based lab game."""

import logging
from abc import ABC, abstractmethod

from medlab.agent.actions import Action, ActionKind
from medlab.agent.state import AgentState
from medlab.client.stream import CommandWriter, TurnReader
from medlab.models.errors import MalformedSnapshot
from medlab.models.snapshot import WorldSnapshot

logger = logging.getLogger(__name__)


class TurnBot(ABC):
    """Base class for robots.

    Subclasses set BOT_NAME and implement decide(state, snapshot) → Action.
    The base class rebuilds the state every turn, applies the local belief
    update for the chosen action and writes exactly one command.
    """

    BOT_NAME: str = ""

    def __init__(
        self,
        source: TurnReader,
        sink: CommandWriter,
        diagnostics: logging.Logger | None = None,
    ) -> None:
        self._source = source
        self._sink = sink
        self._log = diagnostics or logger
        self._state = AgentState()
        self._turn = 0

    @property
    def state(self) -> AgentState:
        return self._state

    @property
    def turn(self) -> int:
        return self._turn

    @abstractmethod
    def decide(self, state: AgentState, snapshot: WorldSnapshot) -> Action:
        """Strategy function: given this turn's state, return the one action.

        This is the only method subclasses must implement.
        """

    def run(self) -> int:
        """Play turns until the input ends. Returns the number of turns played."""
        try:
            projects = self._source.read_projects()
        except EOFError:
            self._log.warning("%s got no input, nothing to play", self.BOT_NAME)
            return self._turn
        self._log.info("%s starting with %d science projects", self.BOT_NAME, len(projects))
        for snapshot in self._source:
            self.play_turn(snapshot)
        self._log.info("%s stopped after %d turns", self.BOT_NAME, self._turn)
        return self._turn

    def play_turn(self, snapshot: WorldSnapshot | None) -> str:
        """Decide and emit the command for one snapshot. Returns the line written.

        Raises:
            MalformedSnapshot: If there is no snapshot to act on.
        """
        if snapshot is None:
            raise MalformedSnapshot("No snapshot for this turn")

        self._turn += 1
        self._state = AgentState.from_snapshot(snapshot)
        self._log.debug(
            "[turn %d] %s at %s carrying %d samples",
            self._turn,
            self.BOT_NAME,
            self._state.position,
            len(self._state.samples),
        )
        self._log.info("[turn %d] molecules %s", self._turn, self._state.inventory.summary())

        action = self.decide(self._state, snapshot)
        self._apply(action)
        line = self._sink.send(action)
        self._log.info("[turn %d] %s: %s", self._turn, self.BOT_NAME, line)
        return line

    # --- Action execution ---

    def _apply(self, action: Action) -> None:
        """Update the local belief so it matches the command being sent."""
        if action.kind == ActionKind.GOTO and action.module is not None:
            self._state.move_to(action.module)
        elif action.kind == ActionKind.CONNECT and action.molecule is not None:
            self._state.inventory.add_molecule(action.molecule)
