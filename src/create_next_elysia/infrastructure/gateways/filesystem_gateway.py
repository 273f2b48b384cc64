"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path

from create_next_elysia.domain.protocols import FileSystemProtocol


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def resolve_path(self, path: str) -> str:
        """Resolve and normalize a path string."""
        return str(Path(path).resolve())

    def exists(self, path: str) -> bool:
        """Return True if anything (file, directory, symlink) is at path."""
        return Path(path).exists()

    def make_dirs(self, path: str, exist_ok: bool = True) -> None:
        """Create directory and parent directories if needed."""
        Path(path).mkdir(parents=True, exist_ok=exist_ok)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        Path(path).write_text(content, encoding=encoding)

    def join_path(self, *paths: str) -> str:
        """Join path components into a single path string."""
        return str(Path(*paths))
