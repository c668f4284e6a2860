"""Exception classes for pandoc-resources."""


class PandocResourcesError(Exception):
    """Base exception for all pandoc-resources errors."""
    pass


class ResourceNotFoundError(PandocResourcesError):
    """Raised when a required resource cannot be located in any search root."""

    def __init__(self, kind: str, name: str, searched: list[str] | None = None):
        self.kind = kind
        self.name = name
        self.searched = searched or []
        message = f"{kind} not found: {name}"
        if self.searched:
            message += f" (searched: {', '.join(self.searched)})"
        super().__init__(message)


class UnsupportedOperationError(PandocResourcesError):
    """Raised when an operation is not available for a resource kind."""
    pass
