"""CLI entry point for create-next-elysia - Thin Controller using Typer."""

import sys
from dataclasses import dataclass
from typing import Optional

import typer

from create_next_elysia.domain.constants import ELYSIA_BANNER
from create_next_elysia.domain.protocols import TelemetryPort
from create_next_elysia.use_cases.collect_answers import CollectAnswersUseCase
from create_next_elysia.use_cases.provision_project import ProvisionProjectUseCase

# B008: avoid function call in default; use module-level singleton for Typer Argument/Option
_PROJECT_NAME_ARGUMENT = typer.Argument(
    None, help="Directory name for the new project (prompted when omitted)")
_VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log every git and package manager invocation to stderr")


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    telemetry: TelemetryPort
    collect_answers: CollectAnswersUseCase
    provision_project: ProvisionProjectUseCase


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="create-next-elysia",
            help=f"{ELYSIA_BANNER}\nScaffold a Next.js + Elysia.js fullstack project.",
            add_completion=False,
        )

        @app.command()
        def create(
            project_name: Optional[str] = _PROJECT_NAME_ARGUMENT,
            verbose: bool = _VERBOSE_OPTION,
        ) -> None:
            """Clone the template, install dependencies and optionally rewire remotes."""
            deps.telemetry.configure_logging(verbose)
            deps.telemetry.handshake()
            try:
                answers = deps.collect_answers.execute(project_name)
                outcome = deps.provision_project.execute(answers)
            except Exception as exc:  # pylint: disable=broad-exception-caught
                deps.telemetry.error(f"❌ Error: {exc}")
                sys.exit(1)
            sys.exit(outcome.exit_code)

        return app
