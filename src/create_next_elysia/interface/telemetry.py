"""
create-next-elysia: User Interface
Console narration for the scaffolder, mirrored into the package logger.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

from create_next_elysia.domain.constants import ELYSIA_BANNER

LOGGER_NAME = "create_next_elysia"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


class ProjectTelemetry:
    """
    Narrates workflow progress to the terminal.

    Narration is the tool's only UI, so every line is printed verbatim
    (no markup, no highlighting, no wrapping) and also logged.
    - step/success/say go to stdout.
    - warning/error go to stderr.
    - debug is log-only.
    """

    def __init__(self, name: str, color: str, welcome: str, detail: str = "") -> None:
        self.name = name
        self.color = color
        self.welcome = welcome
        self.detail = detail
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)
        self.logger = logging.getLogger(LOGGER_NAME)

    def _print(self, console: Console, message: str, style: str | None = None) -> None:
        console.print(message, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def handshake(self) -> None:
        """
        Announce the tool.
        - Banner: interactive TTY with colour allowed.
        - Welcome line only: otherwise (CI, pipes, NO_COLOR).
        """
        if self.console.is_terminal and not os.getenv("NO_COLOR"):
            self.console.print(Text.from_ansi(ELYSIA_BANNER), highlight=False, soft_wrap=True)
        self._print(self.console, f"\n{self.welcome}\n", style=f"bold {self.color}")
        if self.detail:
            self._print(self.console, f"{self.detail}\n")
        self.logger.info("%s: %s", self.name, self.welcome)

    def step(self, message: str) -> None:
        self._print(self.console, message, style=self.color)
        self.logger.info(message)

    def success(self, message: str) -> None:
        self._print(self.console, message, style="green")
        self.logger.info(message)

    def say(self, message: str = "") -> None:
        self._print(self.console, message)
        if message:
            self.logger.debug(message)

    def warning(self, message: str) -> None:
        self._print(self.err_console, message, style="yellow")
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self._print(self.err_console, message, style="bold red")
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)

    @staticmethod
    def configure_logging(verbose: bool) -> None:
        """Route package logs to stderr through rich when verbose output is requested."""
        if not verbose:
            return
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )
