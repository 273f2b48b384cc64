"""Process Gateway - runs git and package manager commands."""

import logging
import subprocess
from collections.abc import Sequence

from create_next_elysia.domain.entities import StepResult
from create_next_elysia.domain.protocols import CommandRunnerProtocol

logger = logging.getLogger(__name__)


class ProcessGateway(CommandRunnerProtocol):
    """
    Runs one external command at a time and waits for it to exit.

    stdin, stdout and stderr are inherited so tool output reaches the user
    live; nothing is captured. OSError (missing executable, missing cwd)
    propagates to the caller, which owns the per-step failure policy.
    """

    def run(self, args: Sequence[str], cwd: str, step: str) -> StepResult:
        argv = list(args)
        logger.debug("[%s] running %s (cwd=%s)", step, argv, cwd)
        completed = subprocess.run(argv, cwd=cwd, check=False)
        logger.debug("[%s] exited with %d", step, completed.returncode)
        return StepResult(step=step, returncode=completed.returncode)
