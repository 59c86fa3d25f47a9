import sys
import time
from typing import Callable, Dict, Optional, TextIO
from .prompt import Prompt
from .reply import Reply
import logging

logger = logging.getLogger(__name__)

class Session:
    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None, title: str = 'Dictionary Menu:'):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.title = title
        self.commands: Dict[str, Callable] = {}
        self.labels: Dict[str, str] = {}

    def command(self, key: str, label: str):
        """Decorator for registering menu command handlers"""
        def decorator(handler):
            self.commands[key] = handler
            self.labels[key] = label
            return handler
        return decorator

    def write(self, *lines: str) -> None:
        for line in lines:
            self.stdout.write(f"{line}\n")
        self.stdout.flush()

    def render_menu(self) -> None:
        self.write(
            "",
            self.title,
            *(f"{key}. {label}" for key, label in self.labels.items()),
            "Enter your choice:",
        )

    def read_choice(self) -> Optional[str]:
        """Read one menu choice, None once input is exhausted"""
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def handle_command(self, choice: str, prompt: Prompt) -> Reply:
        """Route a menu choice to its handler"""
        handler = self.commands.get(choice)

        if handler is None:
            return Reply(lines=["Invalid choice. Please try again."])

        try:
            result = handler(prompt)

            if isinstance(result, Reply):
                return result
            elif isinstance(result, str):
                return Reply(lines=[result])
            elif result is None:
                return Reply()

            raise TypeError("Handler result cannot be turned into a reply")
        except EOFError:
            raise
        except Exception as e:
            logger.error(f"Handler error: {e}")
            return Reply(lines=[f"Internal error: {e}"])

    def run(self) -> None:
        """Run the menu loop until a handler quits or input ends"""
        prompt = Prompt(stdin=self.stdin, stdout=self.stdout)

        try:
            while True:
                self.render_menu()
                choice = self.read_choice()
                if choice is None:
                    logger.info("Input closed, ending session")
                    break

                start_time = time.perf_counter()
                logger.debug(f"--> choice {choice!r}")

                reply = self.handle_command(choice, prompt)
                self.write(*reply.lines)

                elapsed_ms = (time.perf_counter() - start_time) * 1000
                logger.debug(f"<-- {len(reply.lines)} lines - {elapsed_ms:.2f}ms")

                if reply.quit:
                    break
        except EOFError:
            logger.info("Input closed mid-command, ending session")
