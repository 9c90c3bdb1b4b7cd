"""Fixed names and locations shared across the installer."""

DEFAULT_REMOTE_URL = "https://github.com/joseph-ravenwolfe/hyperworker.git"

AVAILABLE_STACKS = ("typescript", "kubernetes")

# Settings templates inside <source>/<stack>/
PROJECT_SETTINGS_TEMPLATE = "settings.json"
USER_SETTINGS_TEMPLATE = "user-settings.json"

GITIGNORE_ENTRY = "/plans"

DEBUG_ENV_VAR = "HYPERWORKER_DEBUG"
