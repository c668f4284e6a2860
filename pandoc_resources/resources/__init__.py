"""Resources module for name-to-path resolution."""

from pandoc_resources.resources.conventions import CONVENTIONS, KindConvention, convention_for
from pandoc_resources.resources.resolver import ResourceResolver

__all__ = ["CONVENTIONS", "KindConvention", "convention_for", "ResourceResolver"]
