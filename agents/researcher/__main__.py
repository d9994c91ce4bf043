"""Entry point: python -m agents.researcher"""

import logging
import os
import sys

from medlab.client.stream import CommandWriter, TurnReader

from agents.researcher.agent import ResearcherBot


def main() -> None:
    logging.basicConfig(
        level=os.environ.get("MEDLAB_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    bot = ResearcherBot(
        source=TurnReader(sys.stdin),
        sink=CommandWriter(sys.stdout),
        diagnostics=logging.getLogger("agents.researcher"),
    )
    bot.run()


if __name__ == "__main__":
    main()
