"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from create_next_elysia.infrastructure.di.container import CreateNextElysiaContainer
from create_next_elysia.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = CreateNextElysiaContainer.get_instance()

    deps = CLIDependencies(
        telemetry=container.get_telemetry_port(),
        collect_answers=container.get_collect_answers(),
        provision_project=container.get_provision_project(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
