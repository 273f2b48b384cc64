"""Use Case: Provision a new project from the next-elysia template."""

from typing import Optional

from create_next_elysia.domain.config import ProvisioningConfig
from create_next_elysia.domain.constants import CLONE_CHECKLIST, CLOSING_MESSAGE
from create_next_elysia.domain.entities import (
    PackageManager,
    ProvisioningOutcome,
    SessionAnswers,
)
from create_next_elysia.domain.protocols import (
    CommandRunnerProtocol,
    FileSystemProtocol,
    TelemetryPort,
)
from create_next_elysia.use_cases.rewrite_remotes import RewriteRemotesUseCase


class ProvisionProjectUseCase:
    """
    Clone, install, summarise and optionally rewire remotes.

    Only two failures are fatal: an existing target path and a failed clone.
    Both leave exit_code=1 on the outcome and stop the run. Install failures
    print the manual command and the run continues.
    """

    def __init__(
        self,
        filesystem: FileSystemProtocol,
        runner: CommandRunnerProtocol,
        telemetry: TelemetryPort,
        config: ProvisioningConfig,
        rewrite_remotes: RewriteRemotesUseCase,
    ) -> None:
        self.filesystem = filesystem
        self.runner = runner
        self.telemetry = telemetry
        self.config = config
        self.rewrite_remotes = rewrite_remotes

    def execute(self, answers: SessionAnswers) -> ProvisioningOutcome:
        self.telemetry.step("\n📥 Setting up project...\n")
        project_path = self.filesystem.resolve_path(answers.project_name)
        outcome = ProvisioningOutcome(project_path=project_path)

        if self.filesystem.exists(project_path):
            self.telemetry.error(f'❌ Directory "{answers.project_name}" already exists!')
            outcome.exit_code = 1
            return outcome

        self.filesystem.make_dirs(project_path)
        self.telemetry.debug(f"Created directory: {project_path}")

        if not self._clone(project_path):
            outcome.exit_code = 1
            return outcome

        if answers.install_now:
            self._install_all(answers, project_path, outcome)
            outcome.installed = True

        self._print_summary(answers, project_path)
        self.rewrite_remotes.execute(project_path, outcome)
        self.telemetry.say(f"{CLOSING_MESSAGE}\n")
        return outcome

    def _clone(self, project_path: str) -> bool:
        self.telemetry.step("📦 Cloning root repository with submodules...")
        args = ["git", "clone", "--recurse-submodules", self.config.template_url, project_path]
        failure: Optional[str] = None
        try:
            result = self.runner.run(args, cwd=self.filesystem.resolve_path("."), step="clone")
            if not result.ok:
                failure = f"Git clone failed with exit code {result.returncode}"
        except OSError as exc:
            failure = str(exc)

        if failure is not None:
            self.telemetry.error("❌ Failed to clone repository")
            self.telemetry.error(f"Error details: {failure}")
            self.telemetry.error("\nMake sure:")
            for item in CLONE_CHECKLIST:
                self.telemetry.error(item)
            return False

        self.telemetry.success("✅ Repository cloned successfully!\n")
        return True

    def _install_all(self, answers: SessionAnswers, project_path: str, outcome: ProvisioningOutcome) -> None:
        manager = answers.package_manager
        self.telemetry.step(f"📚 Installing dependencies with {manager.executable}...\n")
        locations = (
            ("Root", "root", None),
            ("Backend", "backend", self.config.backend_subdir),
            ("Frontend", "frontend", self.config.frontend_subdir),
        )
        for label, noun, subdir in locations:
            self._install(manager, label, noun, subdir, answers.project_name, project_path, outcome)

    def _install(
        self,
        manager: PackageManager,
        label: str,
        noun: str,
        subdir: Optional[str],
        project_name: str,
        project_path: str,
        outcome: ProvisioningOutcome,
    ) -> None:
        cwd = self.filesystem.join_path(project_path, subdir) if subdir else project_path
        display_dir = f"{project_name}/{subdir}" if subdir else project_name
        manual = f"cd {display_dir} && {manager.executable} install"

        self.telemetry.step(f"📦 Installing {noun} dependencies...")
        try:
            result = self.runner.run(manager.install_command(), cwd=cwd, step=f"{noun} install")
        except OSError as exc:
            self.telemetry.error(f"❌ Could not install {noun} dependencies: {exc}")
            self.telemetry.say(f"Please run manually: {manual}")
            outcome.warn(manual)
            return

        if not result.ok:
            self.telemetry.error(f"❌ {label} install failed. Please run manually:")
            self.telemetry.error(f"   {manual}")
            outcome.warn(manual)
            return
        self.telemetry.success(f"✅ {label} dependencies installed!\n")

    def _print_summary(self, answers: SessionAnswers, project_path: str) -> None:
        pm = answers.package_manager.executable
        dev = answers.package_manager.dev_command()
        backend = self.config.backend_subdir
        frontend = self.config.frontend_subdir
        say = self.telemetry.say

        self.telemetry.success("\n🎉 Project created successfully!\n")
        say(f"📁 Project location: {project_path}\n")
        say("📖 Next steps:\n")
        say(f"1. cd {answers.project_name}\n")
        if not answers.install_now:
            say("2. Install dependencies:\n")
            say("   # For backend:")
            say(f"   cd {backend} && {pm} install && cd ../..\n")
            say("   # For frontend:")
            say(f"   cd {frontend} && {pm} install\n")
        say("3. Start development servers:\n")
        say("   # Terminal 1 - Backend:")
        say(f"   cd {backend} && {dev}\n")
        say("   # Terminal 2 - Frontend:")
        say(f"   cd {frontend} && {dev}\n")
        say("📚 For more info, check the README.md in your project\n")
