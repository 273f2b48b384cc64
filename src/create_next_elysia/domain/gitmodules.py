"""Rendering of the .gitmodules descriptor for the backend and frontend submodules."""

from create_next_elysia.domain.constants import BACKEND_SUBDIR, FRONTEND_SUBDIR


class GitmodulesRenderer:
    """Builds the two-stanza .gitmodules file git expects (tab-indented keys)."""

    @staticmethod
    def stanza(path: str, url: str) -> str:
        return f'[submodule "{path}"]\n\tpath = {path}\n\turl = {url}\n'

    @classmethod
    def render(
        cls,
        backend_url: str,
        frontend_url: str,
        backend_path: str = BACKEND_SUBDIR,
        frontend_path: str = FRONTEND_SUBDIR,
    ) -> str:
        return cls.stanza(backend_path, backend_url) + cls.stanza(frontend_path, frontend_url)
