"""Unit tests for CreateNextElysiaContainer."""

import pytest

from create_next_elysia.infrastructure.di.container import CreateNextElysiaContainer
from create_next_elysia.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from create_next_elysia.infrastructure.gateways.process_gateway import ProcessGateway
from create_next_elysia.infrastructure.gateways.prompt_gateway import PromptGateway
from create_next_elysia.interface.telemetry import ProjectTelemetry
from create_next_elysia.use_cases.provision_project import ProvisionProjectUseCase


@pytest.fixture(autouse=True)
def _reset_container():
    CreateNextElysiaContainer.reset()
    yield
    CreateNextElysiaContainer.reset()


def test_defaults_are_registered() -> None:
    container = CreateNextElysiaContainer()
    assert isinstance(container.get_telemetry_port(), ProjectTelemetry)
    assert isinstance(container.get_filesystem_gateway(), FileSystemGateway)
    assert isinstance(container.get_command_runner(), ProcessGateway)
    assert isinstance(container.get_prompter(), PromptGateway)
    assert isinstance(container.get_provision_project(), ProvisionProjectUseCase)


def test_use_cases_share_gateways() -> None:
    container = CreateNextElysiaContainer()
    provision = container.get_provision_project()
    assert provision.runner is container.get_command_runner()
    assert provision.rewrite_remotes is container.get_rewrite_remotes()
    assert container.get_collect_answers().prompter is container.get_prompter()


def test_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("CREATE_NEXT_ELYSIA_TEMPLATE_URL", "file:///mirror.git")
    container = CreateNextElysiaContainer()
    assert container.get_config().template_url == "file:///mirror.git"


def test_get_unknown_key_raises() -> None:
    with pytest.raises(ValueError, match="not registered"):
        CreateNextElysiaContainer().get("Nope")


def test_get_instance_is_singleton() -> None:
    assert CreateNextElysiaContainer.get_instance() is CreateNextElysiaContainer.get_instance()
