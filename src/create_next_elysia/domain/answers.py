"""Pure resolution of interactive answers into session values."""

from typing import Optional

from create_next_elysia.domain.constants import DEFAULT_PROJECT_NAME
from create_next_elysia.domain.entities import PackageManager

_MENU_SELECTORS: dict[str, PackageManager] = {
    "2": PackageManager.NPM,
    "3": PackageManager.YARN,
}


class AnswerResolver:
    """Maps raw prompt input to typed answers. No I/O."""

    @staticmethod
    def resolve_project_name(
        argument: Optional[str], answer: Optional[str] = None, default: str = DEFAULT_PROJECT_NAME
    ) -> str:
        """Positional argument wins; otherwise the prompt answer; only "" falls back to default."""
        if argument:
            return argument
        if answer:
            return answer
        return default

    @staticmethod
    def resolve_package_manager(choice: str) -> PackageManager:
        """'2' -> npm, '3' -> yarn, anything else -> bun."""
        return _MENU_SELECTORS.get(choice, PackageManager.BUN)

    @staticmethod
    def resolve_install_now(answer: str) -> bool:
        """Only a case-insensitive 'no' skips installation."""
        return answer.lower() != "no"

    @staticmethod
    def resolve_opt_in(answer: str) -> bool:
        """Only a case-insensitive 'yes' opts in; empty means no."""
        return answer.lower() == "yes"
