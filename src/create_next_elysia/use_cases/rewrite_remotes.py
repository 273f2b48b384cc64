"""Use Case: Point the cloned repositories at user-supplied remotes and push."""

import shlex
from collections.abc import Sequence

from create_next_elysia.domain.answers import AnswerResolver
from create_next_elysia.domain.config import ProvisioningConfig
from create_next_elysia.domain.constants import (
    BACKEND_REPO_PROMPT,
    FRONTEND_REPO_PROMPT,
    GITMODULES_FILENAME,
    ROOT_REPO_PROMPT,
    SETUP_REPOS_PROMPT,
)
from create_next_elysia.domain.entities import ProvisioningOutcome, RepositoryTargets
from create_next_elysia.domain.gitmodules import GitmodulesRenderer
from create_next_elysia.domain.protocols import (
    CommandRunnerProtocol,
    FileSystemProtocol,
    PromptProtocol,
    TelemetryPort,
)


class RewriteRemotesUseCase:
    """
    Rewire root, backend and frontend remotes, then commit and push.

    Submodule URLs are rewritten through .gitmodules followed by
    `git submodule sync --recursive`, so submodule metadata stays consistent
    with the new remotes. Every operation is best-effort: a failure is
    reported with the command to run by hand and the sequence continues.
    """

    def __init__(
        self,
        filesystem: FileSystemProtocol,
        runner: CommandRunnerProtocol,
        telemetry: TelemetryPort,
        prompter: PromptProtocol,
        config: ProvisioningConfig,
    ) -> None:
        self.filesystem = filesystem
        self.runner = runner
        self.telemetry = telemetry
        self.prompter = prompter
        self.config = config

    def prompt_opt_in(self) -> bool:
        return AnswerResolver.resolve_opt_in(self.prompter.ask(SETUP_REPOS_PROMPT))

    def collect_targets(self) -> RepositoryTargets:
        return RepositoryTargets(
            root_url=self.prompter.ask(ROOT_REPO_PROMPT).strip(),
            backend_url=self.prompter.ask(BACKEND_REPO_PROMPT).strip(),
            frontend_url=self.prompter.ask(FRONTEND_REPO_PROMPT).strip(),
        )

    def execute(self, project_path: str, outcome: ProvisioningOutcome) -> bool:
        """Ask whether to rewire remotes and do so. Returns True when the stage ran."""
        if not self.prompt_opt_in():
            return False

        self.telemetry.step("\n📦 Setting up new GitHub repositories...\n")
        self.apply(project_path, self.collect_targets(), outcome)
        return True

    def apply(self, project_path: str, targets: RepositoryTargets, outcome: ProvisioningOutcome) -> None:
        """Run every step whose repository has a URL; blank URLs only skip their own steps."""
        backend_path = self.filesystem.join_path(project_path, self.config.backend_subdir)
        frontend_path = self.filesystem.join_path(project_path, self.config.frontend_subdir)
        push = ["git", "push", "-u", "origin", self.config.branch]
        warnings_before = len(outcome.warnings)

        missing = targets.missing()
        for label in missing:
            self._skip(f"No {label} repository URL given; skipping its remote and push.", outcome)
        submodules_ready = "backend" not in missing and "frontend" not in missing

        if "root" not in missing:
            self.telemetry.step("\n📝 Updating root repository...")
            self._git(["git", "remote", "set-url", "origin", targets.root_url],
                      project_path, "root remote", outcome)

        if submodules_ready:
            self.telemetry.step("\n📝 Updating submodule configuration...")
            self._write_gitmodules(project_path, targets, outcome)
            self._git(["git", "submodule", "sync", "--recursive"],
                      project_path, "submodule sync", outcome)
        else:
            self._skip(f"{GITMODULES_FILENAME} left unchanged; it needs both submodule URLs.", outcome)

        if "backend" not in missing:
            self.telemetry.step("\n📝 Updating backend repository...")
            self._git(["git", "remote", "set-url", "origin", targets.backend_url],
                      backend_path, "backend remote", outcome)

        if "frontend" not in missing:
            self.telemetry.step("\n📝 Updating frontend repository...")
            self._git(["git", "remote", "set-url", "origin", targets.frontend_url],
                      frontend_path, "frontend remote", outcome)

        if submodules_ready:
            self.telemetry.step("\n📝 Committing submodule remotes...")
            self._git(["git", "add", GITMODULES_FILENAME], project_path, "stage .gitmodules", outcome)
            self._git(["git", "commit", "-m", self.config.commit_message],
                      project_path, "commit", outcome)

        self.telemetry.step("\n🚀 Pushing repositories...")
        if "backend" not in missing:
            self._git(push, backend_path, "backend push", outcome)
        if "frontend" not in missing:
            self._git(push, frontend_path, "frontend push", outcome)
        if "root" not in missing:
            self._git(push, project_path, "root push", outcome)

        if len(outcome.warnings) == warnings_before:
            self.telemetry.success("\n✅ All repositories updated successfully!\n")
        else:
            self.telemetry.warning(
                "\n⚠️  Repositories updated with warnings; see the manual commands above.\n")
        self.telemetry.say("🔗 Your project repositories:")
        self.telemetry.say(f"  Root: {targets.root_url or '(not set)'}")
        self.telemetry.say(f"  Backend: {targets.backend_url or '(not set)'}")
        self.telemetry.say(f"  Frontend: {targets.frontend_url or '(not set)'}\n")

    def _skip(self, reason: str, outcome: ProvisioningOutcome) -> None:
        message = f"⚠️  {reason}"
        self.telemetry.warning(message)
        outcome.warn(message)

    def _write_gitmodules(
        self, project_path: str, targets: RepositoryTargets, outcome: ProvisioningOutcome
    ) -> None:
        gitmodules_path = self.filesystem.join_path(project_path, GITMODULES_FILENAME)
        content = GitmodulesRenderer.render(
            targets.backend_url,
            targets.frontend_url,
            backend_path=self.config.backend_subdir,
            frontend_path=self.config.frontend_subdir,
        )
        try:
            self.filesystem.write_text(gitmodules_path, content)
        except OSError as exc:
            message = f"⚠️  Could not write {gitmodules_path}: {exc}"
            self.telemetry.warning(message)
            outcome.warn(message)
            return
        self.telemetry.debug(f"Wrote {gitmodules_path}")

    def _git(self, args: Sequence[str], cwd: str, step: str, outcome: ProvisioningOutcome) -> bool:
        manual = f"cd {shlex.quote(cwd)} && {shlex.join(args)}"
        try:
            result = self.runner.run(args, cwd=cwd, step=step)
        except OSError as exc:
            message = f"⚠️  {step} could not run ({exc}). Run manually:\n   {manual}"
            self.telemetry.warning(message)
            outcome.warn(message)
            return False
        if not result.ok:
            message = f"⚠️  {step} failed (exit code {result.returncode}). Run manually:\n   {manual}"
            self.telemetry.warning(message)
            outcome.warn(message)
            return False
        return True
