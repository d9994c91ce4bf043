"""Replay — feed a recorded game transcript through the Researcher bot.

Run with: python scripts/replay_turns.py [transcript.txt]
Without a file, a short built-in transcript is replayed.
"""

import io
import logging
import sys

from medlab import CommandWriter, TurnReader

from agents.researcher.agent import ResearcherBot

DEMO_TRANSCRIPT = """\
1
0 3 3 3 0
START_POS 0 0 0 0 0 0 0 0 0 0 0 0
START_POS 0 0 0 0 0 0 0 0 0 0 0 0
5 5 5 5 5
2
1 -1 1 0 1 2 1 0 0 0
2 -1 1 0 1 0 0 3 0 0
DIAGNOSIS 0 0 0 0 0 0 0 0 0 0 0 0
DIAGNOSIS 0 0 0 0 0 0 0 0 0 0 0 0
5 5 5 5 5
2
1 -1 1 0 1 2 1 0 0 0
2 -1 1 0 1 0 0 3 0 0
DIAGNOSIS 0 0 0 0 0 0 0 0 0 0 0 0
DIAGNOSIS 0 0 0 0 0 0 0 0 0 0 0 0
5 5 5 5 5
2
1 -1 1 0 1 2 1 0 0 0
2 0 1 0 1 0 0 3 0 0
MOLECULES 0 0 0 0 0 3 0 0 0 0 0 0
DIAGNOSIS 0 0 0 0 0 0 0 0 0 0 0 0
2 5 5 5 5
2
1 -1 1 0 1 2 1 0 0 0
2 0 1 0 1 0 0 3 0 0
"""


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(levelname)s: %(message)s")

    if len(sys.argv) > 1:
        with open(sys.argv[1]) as f:
            transcript = f.read()
    else:
        transcript = DEMO_TRANSCRIPT

    commands = io.StringIO()
    bot = ResearcherBot(source=TurnReader(io.StringIO(transcript)), sink=CommandWriter(commands))

    print("=" * 60)
    print("  MEDLAB — Replay")
    print("=" * 60)
    turns = bot.run()
    for number, line in enumerate(commands.getvalue().splitlines(), start=1):
        print(f"[turn {number}] {line}")
    print()
    print(f"Replayed {turns} turns.")


if __name__ == "__main__":
    main()
