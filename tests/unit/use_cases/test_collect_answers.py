"""Unit tests for CollectAnswersUseCase."""

from unittest.mock import MagicMock

from create_next_elysia.domain.config import ProvisioningConfig
from create_next_elysia.domain.constants import PROJECT_NAME_PROMPT
from create_next_elysia.domain.entities import PackageManager
from create_next_elysia.use_cases.collect_answers import CollectAnswersUseCase


def _use_case(prompter) -> CollectAnswersUseCase:
    return CollectAnswersUseCase(prompter, MagicMock(), ProvisioningConfig())


def test_prompts_for_name_when_no_argument(make_prompter) -> None:
    prompter = make_prompter(["demo", "3", "no"])
    answers = _use_case(prompter).execute(None)

    assert prompter.questions[0] == PROJECT_NAME_PROMPT
    assert answers.project_name == "demo"
    assert answers.package_manager is PackageManager.YARN
    assert answers.install_now is False


def test_positional_argument_skips_name_prompt(make_prompter) -> None:
    prompter = make_prompter(["2", ""])
    answers = _use_case(prompter).execute("from-arg")

    assert PROJECT_NAME_PROMPT not in prompter.questions
    assert len(prompter.questions) == 2
    assert answers.project_name == "from-arg"
    assert answers.package_manager is PackageManager.NPM
    assert answers.install_now is True


def test_empty_answers_use_defaults(make_prompter) -> None:
    answers = _use_case(make_prompter([])).execute(None)

    assert answers.project_name == "my-next-elysia-app"
    assert answers.package_manager is PackageManager.BUN
    assert answers.install_now is True


def test_menu_lists_three_choices(make_prompter) -> None:
    telemetry = MagicMock()
    CollectAnswersUseCase(make_prompter([]), telemetry, ProvisioningConfig()).execute("x")

    said = [c.args[0] for c in telemetry.say.call_args_list]
    assert "1. bun (recommended)" in said
    assert "2. npm" in said
    assert "3. yarn" in said


def test_padded_answers_are_not_trimmed(make_prompter) -> None:
    prompter = make_prompter([" demo", " 2", "no "])
    answers = _use_case(prompter).execute(None)

    assert answers.project_name == " demo"
    assert answers.package_manager is PackageManager.BUN
    assert answers.install_now is True


def test_padded_argument_is_kept_verbatim(make_prompter) -> None:
    prompter = make_prompter([])
    answers = _use_case(prompter).execute("demo ")

    assert PROJECT_NAME_PROMPT not in prompter.questions
    assert answers.project_name == "demo "
