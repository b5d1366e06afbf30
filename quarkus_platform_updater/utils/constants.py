"""Shared constants used across the application."""

# Platforms API Constants
# -----------------------

DEFAULT_PLATFORMS_API_URL = "https://code.quarkus.io/api/platforms"
"""Endpoint listing the released Quarkus platforms, newest first."""

DEFAULT_HTTP_TIMEOUT = 30.0
"""Default timeout in seconds for requests against the platforms API."""

# Descriptor Constants
# --------------------

PLATFORM_VERSION_PROPERTY = "quarkus.platform.version"
"""Maven property that pins the Quarkus platform version in a descriptor."""

DEFAULT_DESCRIPTOR_PATHS = (
    "templates/quarkus/cloudevents/pom.xml",
    "templates/quarkus/http/pom.xml",
)
"""Repository-relative paths of the descriptors kept in sync with the platform."""

DEFAULT_GENERATED_FILE = "zz_filesystem_generated.go"
"""Derived file regenerated with make before committing the descriptors."""

# Pull Request Constants
# ----------------------

PULL_REQUEST_TITLE_TEMPLATE = "chore: update Quarkus platform version to {version}"
"""Title (and commit message and body) of the update pull request."""

BRANCH_NAME_PREFIX = "update-quarkus-platform"
"""Prefix of the branch carrying the update; the version is appended."""

DEFAULT_BASE_BRANCH = "main"
DEFAULT_REMOTE = "origin"

DEFAULT_PULL_REQUEST_PAGE_SIZE = 10
"""Page size used when scanning open pull requests for a duplicate."""
MAX_PULL_REQUEST_PAGE_SIZE = 100
"""Largest per_page value GitHub honours; larger values are silently capped."""

# Committer Constants
# -------------------

DEFAULT_COMMITTER_NAME = "Knative Automation"
DEFAULT_COMMITTER_EMAIL = "automation@knative.team"
