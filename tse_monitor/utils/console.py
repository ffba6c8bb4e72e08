"""Line-oriented console interaction."""

import asyncio
import os
from typing import Iterable, List

GREEN = '\x1b[32m'
RESET = '\x1b[0m'


class ConsoleIO:
    """Prompt/response and status reporting on the terminal."""

    def __init__(self, color: bool = True):
        self.color = color

    async def ask(self, prompt: str) -> str:
        """Read one line without blocking the event loop."""
        answer = await asyncio.to_thread(input, prompt)
        return answer.strip()

    def show(self, line: str = ""):
        print(line)

    def error(self, line: str):
        print(f"✗ {line}")

    def clear(self):
        os.system('cls' if os.name == 'nt' else 'clear')


def format_candidate(candidate, color: bool = True) -> str:
    """Render one CandidateResult as a status line."""
    def value(text: str) -> str:
        return f"{GREEN}{text}{RESET}" if color else text

    line = (
        f"Name: {value(candidate.name)}, "
        f"Percentage: {value(candidate.vote_percentage)}, "
        f"Total votes: {value(candidate.total_votes)}, "
        f"Party: {value(candidate.party)}"
    )
    return f"{RESET}{line}" if color else line


def numbered(items: Iterable[str]) -> List[str]:
    return [f"{index}. {item}" for index, item in enumerate(items, 1)]
