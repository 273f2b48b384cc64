from typing import TYPE_CHECKING, Any, Optional, cast

from create_next_elysia.domain.config import ProvisioningConfig
from create_next_elysia.domain.constants import WELCOME_DETAIL, WELCOME_MESSAGE
from create_next_elysia.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from create_next_elysia.infrastructure.gateways.process_gateway import ProcessGateway
from create_next_elysia.infrastructure.gateways.prompt_gateway import PromptGateway
from create_next_elysia.interface.telemetry import ProjectTelemetry
from create_next_elysia.use_cases.collect_answers import CollectAnswersUseCase
from create_next_elysia.use_cases.provision_project import ProvisionProjectUseCase
from create_next_elysia.use_cases.rewrite_remotes import RewriteRemotesUseCase

if TYPE_CHECKING:
    from create_next_elysia.domain.protocols import (
        CommandRunnerProtocol,
        FileSystemProtocol,
        PromptProtocol,
        TelemetryPort,
    )


class CreateNextElysiaContainer:
    """Dependency Injection Container for the scaffolder."""

    _instance: Optional["CreateNextElysiaContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config = ProvisioningConfig.from_env()
        self.register_singleton("ProvisioningConfig", config)

        telemetry = ProjectTelemetry(
            "CREATE-NEXT-ELYSIA", "cyan", WELCOME_MESSAGE, WELCOME_DETAIL)
        self.register_singleton("TelemetryPort", telemetry)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        runner = ProcessGateway()
        self.register_singleton("ProcessGateway", runner)
        prompter = PromptGateway()
        self.register_singleton("PromptGateway", prompter)

        # Use cases
        self.register_singleton(
            "CollectAnswersUseCase",
            CollectAnswersUseCase(prompter, telemetry, config),
        )
        rewrite_remotes = RewriteRemotesUseCase(
            filesystem=filesystem,
            runner=runner,
            telemetry=telemetry,
            prompter=prompter,
            config=config,
        )
        self.register_singleton("RewriteRemotesUseCase", rewrite_remotes)
        self.register_singleton(
            "ProvisionProjectUseCase",
            ProvisionProjectUseCase(
                filesystem=filesystem,
                runner=runner,
                telemetry=telemetry,
                config=config,
                rewrite_remotes=rewrite_remotes,
            ),
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config(self) -> ProvisioningConfig:
        """Return the provisioning settings."""
        return cast(ProvisioningConfig, self.get("ProvisioningConfig"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_command_runner(self) -> "CommandRunnerProtocol":
        """Return the subprocess runner."""
        return cast("CommandRunnerProtocol", self.get("ProcessGateway"))

    def get_prompter(self) -> "PromptProtocol":
        """Return the interactive prompt reader."""
        return cast("PromptProtocol", self.get("PromptGateway"))

    def get_collect_answers(self) -> CollectAnswersUseCase:
        return cast(CollectAnswersUseCase, self.get("CollectAnswersUseCase"))

    def get_rewrite_remotes(self) -> RewriteRemotesUseCase:
        return cast(RewriteRemotesUseCase, self.get("RewriteRemotesUseCase"))

    def get_provision_project(self) -> ProvisionProjectUseCase:
        return cast(ProvisionProjectUseCase, self.get("ProvisionProjectUseCase"))

    @classmethod
    def get_instance(cls) -> "CreateNextElysiaContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = CreateNextElysiaContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
