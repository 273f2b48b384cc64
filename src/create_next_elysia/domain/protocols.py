from collections.abc import Sequence
from typing import Protocol

from create_next_elysia.domain.entities import StepResult


class TelemetryPort(Protocol):
    """Protocol for user-facing narration and logging."""

    def handshake(self) -> None: ...
    def step(self, message: str) -> None: ...
    def success(self, message: str) -> None: ...
    def say(self, message: str = "") -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def configure_logging(self, verbose: bool) -> None: ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def resolve_path(self, path: str) -> str:
        """Resolve a path string to an absolute path."""
        ...

    def exists(self, path: str) -> bool:
        """Return True if path exists (file or directory)."""
        ...

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file, replacing it."""
        ...

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        ...


class CommandRunnerProtocol(Protocol):
    """Protocol for running external commands with inherited standard streams."""

    def run(self, args: Sequence[str], cwd: str, step: str) -> StepResult:
        """Run args in cwd and wait for exit. Raises OSError if the command cannot start."""
        ...


class PromptProtocol(Protocol):
    """Protocol for blocking line input."""

    def ask(self, question: str) -> str:
        """Return one line typed by the user (without trailing newline)."""
        ...
