from dataclasses import dataclass
from typing import TextIO


@dataclass
class Prompt:
    stdin: TextIO
    stdout: TextIO

    def ask(self, text: str) -> str:
        if text is None:
            raise ValueError("Prompt text cannot be None")

        self.stdout.write(f"{text}\n")
        self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            raise EOFError("Input closed")

        return line.strip()

    def confirm(self, question: str) -> bool:
        answer = self.ask(f"{question} (Yes/No):")
        return answer.lower() in ("yes", "y")
