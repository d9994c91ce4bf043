"""ResearcherBot — diagnoses samples, gathers molecules and researches them."""

from medlab.agent.actions import Action
from medlab.agent.base import TurnBot
from medlab.agent.state import AgentState
from medlab.models.snapshot import WorldSnapshot

from agents.researcher.strategy import decide


class ResearcherBot(TurnBot):
    BOT_NAME = "Researcher"

    def decide(self, state: AgentState, snapshot: WorldSnapshot) -> Action:
        return decide(state, snapshot)
