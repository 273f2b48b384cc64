from dataclasses import dataclass, field
from enum import Enum


class PackageManager(Enum):
    """Package managers offered in the selection menu. Value is the executable."""
    BUN = "bun"
    NPM = "npm"
    YARN = "yarn"

    @property
    def executable(self) -> str:
        return self.value

    def install_command(self) -> list[str]:
        return [self.value, "install"]

    def dev_command(self) -> str:
        return f"{self.value} run dev"


@dataclass(frozen=True)
class SessionAnswers:
    """Answers collected from the interactive prompts. Immutable once read."""
    project_name: str
    package_manager: PackageManager
    install_now: bool


@dataclass(frozen=True)
class RepositoryTargets:
    """Remote URLs the cloned repositories are rewired to."""
    root_url: str
    backend_url: str
    frontend_url: str

    def missing(self) -> list[str]:
        """Labels of the repositories left without a URL, in root/backend/frontend order."""
        urls = {"root": self.root_url, "backend": self.backend_url, "frontend": self.frontend_url}
        return [label for label, url in urls.items() if not url.strip()]


@dataclass(frozen=True)
class StepResult:
    """Exit status of one external command step."""
    step: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass
class ProvisioningOutcome:
    """
    Result of one provisioning run.

    The CLI converts exit_code into the process exit status. Advisory
    warnings were already printed inline; they are kept here for callers.
    """
    project_path: str
    exit_code: int = 0
    installed: bool = False
    warnings: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    def warn(self, message: str) -> None:
        self.warnings.append(message)
