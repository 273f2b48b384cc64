"""
create-next-elysia: Fixed template coordinates and console copy
"""

# Banner: ANSI Cyan (\033[36m)
_CYAN: str = "\033[36m"
_RESET: str = "\033[0m"
_ELYSIA_ART: str = r"""
   _  __         __    ____     __         _
  / |/ /____ __ / /_  / __/ __ / /_ _____ (_)__ _
 /    / -_) \ // __/ / _/  / // / // (_-</ / _ `/
/_/|_/\__/_\_\ \__/ /___/ /_/\_, //___/_/\_,_/
                            /___/   fullstack starter
"""
ELYSIA_BANNER = _CYAN + _ELYSIA_ART + _RESET

TEMPLATE_REPOSITORY_URL: str = "https://github.com/XAN44/next-elysia.git"
DEFAULT_PROJECT_NAME: str = "my-next-elysia-app"

BACKEND_SUBDIR: str = "back-end/app"
FRONTEND_SUBDIR: str = "front-end/my-app"
DEFAULT_BRANCH: str = "main"
SUBMODULE_COMMIT_MESSAGE: str = "Update submodule remotes"
GITMODULES_FILENAME: str = ".gitmodules"

# Environment overrides (no configuration files are read)
ENV_TEMPLATE_URL: str = "CREATE_NEXT_ELYSIA_TEMPLATE_URL"
ENV_BRANCH: str = "CREATE_NEXT_ELYSIA_BRANCH"

WELCOME_MESSAGE: str = "✨ Welcome to create-next-elysia!"
WELCOME_DETAIL: str = "Creating your Next.js + Elysia.js fullstack project..."

PROJECT_NAME_PROMPT: str = "📁 Project name: "
PACKAGE_MANAGER_MENU_TITLE: str = "📦 Select package manager:"
PACKAGE_MANAGER_PROMPT: str = "Choose (1-3) [default: 1]: "
INSTALL_NOW_PROMPT: str = "⚙️  Install dependencies now? (yes/no) [default: yes]: "
SETUP_REPOS_PROMPT: str = (
    "🔄 Do you want to setup new GitHub repositories for this project? "
    "(yes/no) [default: no]: "
)
ROOT_REPO_PROMPT: str = (
    "Enter root repository URL (e.g., https://github.com/username/my-project.git): "
)
BACKEND_REPO_PROMPT: str = (
    "Enter backend repository URL "
    "(e.g., https://github.com/username/my-project-backend.git): "
)
FRONTEND_REPO_PROMPT: str = (
    "Enter frontend repository URL "
    "(e.g., https://github.com/username/my-project-frontend.git): "
)

CLONE_CHECKLIST: tuple[str, ...] = (
    "1. Git is installed (run: git --version)",
    "2. You have internet connection",
    "3. Repository URL is accessible",
)

CLOSING_MESSAGE: str = "🚀 Happy coding!"
