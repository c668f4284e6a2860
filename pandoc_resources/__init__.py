"""pandoc-resources - layered lookup of pandoc templates, presets, styles and assets.

Resources are searched in a project-local ``.opencode/pandoc`` directory
before the user-global ``$XDG_CONFIG_HOME/opencode/pandoc`` directory.
"""

from pandoc_resources.exceptions import (
    PandocResourcesError,
    ResourceNotFoundError,
    UnsupportedOperationError,
)

from pandoc_resources.models import (
    AuditEvent,
    ListedEntry,
    Provenance,
    ResolvedPath,
    ResourceKind,
    SearchRoots,
)

from pandoc_resources.observability import AuditSink, JSONLAuditSink, StdoutAuditSink
from pandoc_resources.discovery import ResourceScanner
from pandoc_resources.resources import ResourceResolver
from pandoc_resources.runtime import (
    USER_LAYOUT,
    PandocResources,
    ensure_user_layout,
    ensure_user_layout_async,
)

__version__ = "0.1.0"

__all__ = [
    # Exceptions
    "PandocResourcesError",
    "ResourceNotFoundError",
    "UnsupportedOperationError",
    # Models
    "AuditEvent",
    "ListedEntry",
    "Provenance",
    "ResolvedPath",
    "ResourceKind",
    "SearchRoots",
    # Components
    "ResourceResolver",
    "ResourceScanner",
    "PandocResources",
    "USER_LAYOUT",
    "ensure_user_layout",
    "ensure_user_layout_async",
    # Observability
    "AuditSink",
    "JSONLAuditSink",
    "StdoutAuditSink",
]
