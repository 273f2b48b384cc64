"""Use Case: Collect the session answers (project name, package manager, install flag)."""

from typing import Optional

from create_next_elysia.domain.answers import AnswerResolver
from create_next_elysia.domain.config import ProvisioningConfig
from create_next_elysia.domain.constants import (
    INSTALL_NOW_PROMPT,
    PACKAGE_MANAGER_MENU_TITLE,
    PACKAGE_MANAGER_PROMPT,
    PROJECT_NAME_PROMPT,
)
from create_next_elysia.domain.entities import PackageManager, SessionAnswers
from create_next_elysia.domain.protocols import PromptProtocol, TelemetryPort

_MENU_LABELS: dict[PackageManager, str] = {
    PackageManager.BUN: "bun (recommended)",
    PackageManager.NPM: "npm",
    PackageManager.YARN: "yarn",
}


class CollectAnswersUseCase:
    """Ask the three opening questions in order and resolve them."""

    def __init__(
        self,
        prompter: PromptProtocol,
        telemetry: TelemetryPort,
        config: ProvisioningConfig,
    ) -> None:
        self.prompter = prompter
        self.telemetry = telemetry
        self.config = config

    def execute(self, project_argument: Optional[str] = None) -> SessionAnswers:
        project_name = self._ask_project_name(project_argument)
        package_manager = self._ask_package_manager()
        install_now = AnswerResolver.resolve_install_now(
            self.prompter.ask(f"\n{INSTALL_NOW_PROMPT}"))
        self.telemetry.debug(
            f"Answers: name={project_name!r} pm={package_manager.value} install={install_now}")
        return SessionAnswers(
            project_name=project_name,
            package_manager=package_manager,
            install_now=install_now,
        )

    def _ask_project_name(self, project_argument: Optional[str]) -> str:
        if project_argument:
            return AnswerResolver.resolve_project_name(project_argument)
        answer = self.prompter.ask(PROJECT_NAME_PROMPT)
        return AnswerResolver.resolve_project_name(
            None, answer, default=self.config.default_project_name)

    def _ask_package_manager(self) -> PackageManager:
        self.telemetry.say(f"\n{PACKAGE_MANAGER_MENU_TITLE}")
        for index, manager in enumerate(PackageManager, start=1):
            self.telemetry.say(f"{index}. {_MENU_LABELS[manager]}")
        return AnswerResolver.resolve_package_manager(self.prompter.ask(PACKAGE_MANAGER_PROMPT))
