"""Runtime settings for the provisioning workflow."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional

from create_next_elysia.domain.constants import (
    BACKEND_SUBDIR,
    DEFAULT_BRANCH,
    DEFAULT_PROJECT_NAME,
    ENV_BRANCH,
    ENV_TEMPLATE_URL,
    FRONTEND_SUBDIR,
    SUBMODULE_COMMIT_MESSAGE,
    TEMPLATE_REPOSITORY_URL,
)


@dataclass(frozen=True)
class ProvisioningConfig:
    """
    Fixed coordinates of the template and its layout.

    Defaults describe the next-elysia template. Only the template URL and the
    push branch can be overridden, through environment variables; there is no
    configuration file.
    """

    template_url: str = TEMPLATE_REPOSITORY_URL
    default_project_name: str = DEFAULT_PROJECT_NAME
    backend_subdir: str = BACKEND_SUBDIR
    frontend_subdir: str = FRONTEND_SUBDIR
    branch: str = DEFAULT_BRANCH
    commit_message: str = SUBMODULE_COMMIT_MESSAGE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ProvisioningConfig":
        """Build config, honouring CREATE_NEXT_ELYSIA_* overrides when set and non-empty."""
        env = os.environ if environ is None else environ
        overrides: dict[str, str] = {}
        template_url = env.get(ENV_TEMPLATE_URL, "").strip()
        if template_url:
            overrides["template_url"] = template_url
        branch = env.get(ENV_BRANCH, "").strip()
        if branch:
            overrides["branch"] = branch
        return cls(**overrides)
