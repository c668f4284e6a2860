"""Entry point for locating pandoc templates, presets, citation styles and assets.

This module provides the PandocResources class, which ties the resolver, the
scanner and the layout bootstrap to one pair of search roots and reports
every operation to an optional audit sink.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Mapping

from pandoc_resources.discovery.scanner import ResourceScanner
from pandoc_resources.exceptions import ResourceNotFoundError
from pandoc_resources.models import (
    AuditEvent,
    ListedEntry,
    ResolvedPath,
    ResourceKind,
    SearchRoots,
)
from pandoc_resources.observability.audit import AuditSink
from pandoc_resources.render.json_renderer import JSONRenderer
from pandoc_resources.render.yaml_renderer import YAMLRenderer
from pandoc_resources.resources.resolver import ResourceResolver
from pandoc_resources.runtime.layout import ensure_user_layout, ensure_user_layout_async


class PandocResources:
    """Resolve and list pandoc resources for one project.

    Lookups search ``<project>/.opencode/pandoc`` before the user directory
    (``$XDG_CONFIG_HOME/opencode/pandoc``, default ``~/.config/opencode/pandoc``).
    The roots are fixed at construction; nothing is cached between calls, so
    every lookup reflects the filesystem as it is now.

    Example:
        >>> resources = PandocResources(project_root=Path("./paper"))
        >>> template = resources.resolve_template("ieee")
        >>> if template:
        ...     print(template.path, template.source.value)
        >>> for preset in resources.list_presets():
        ...     print(preset.name)
    """

    def __init__(
        self,
        project_root: Path | str | None = None,
        user_dir: Path | str | None = None,
        audit_sink: AuditSink | None = None,
        environ: Mapping[str, str] | None = None,
        roots: SearchRoots | None = None,
    ):
        """Initialize with optional explicit roots.

        Args:
            project_root: Project directory. Defaults to the working directory.
            user_dir: User pandoc directory. Defaults to one derived from
                     ``XDG_CONFIG_HOME`` (read once, here).
            audit_sink: Optional AuditSink for logging operations.
            environ: Environment mapping to read instead of ``os.environ``.
            roots: Fully resolved roots; when given, the other path
                  arguments and the environment are ignored.
        """
        if roots is None:
            roots = SearchRoots.from_environment(project_root, environ=environ, user_dir=user_dir)
        self._roots = roots
        self._audit_sink = audit_sink
        self._resolver = ResourceResolver(roots)
        self._scanner = ResourceScanner(roots, audit_sink=audit_sink)

    @property
    def roots(self) -> SearchRoots:
        return self._roots

    @property
    def user_config_dir(self) -> Path:
        return self._roots.user_dir

    @property
    def project_config_dir(self) -> Path | None:
        return self._roots.project_dir

    def resolve(self, kind: ResourceKind | str, name: str) -> ResolvedPath | None:
        """Resolve a resource name of any kind.

        Returns:
            ResolvedPath, or None when no root has the resource
        """
        kind = ResourceKind.parse(kind)
        resolved = self._resolver.resolve(kind, name)
        self._log(
            "resolve",
            kind,
            name=str(name),
            path=str(resolved.path) if resolved else None,
            source=resolved.source.value if resolved else None,
            detail={"found": resolved is not None},
        )
        return resolved

    def resolve_template(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.TEMPLATE, name)

    def resolve_preset(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.PRESET, name)

    def resolve_csl(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.CSL, name)

    def resolve_asset(self, path: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.ASSET, path)

    def require(self, kind: ResourceKind | str, name: str) -> ResolvedPath:
        """Resolve a resource or fail.

        Raises:
            ResourceNotFoundError: If no root has the resource
        """
        kind = ResourceKind.parse(kind)
        resolved = self.resolve(kind, name)
        if resolved is None:
            searched = [str(path) for _, path in self._resolver.candidates(kind, name)]
            raise ResourceNotFoundError(kind.value, str(name), searched)
        return resolved

    def candidates(self, kind: ResourceKind | str, name: str) -> list[Path]:
        """Paths a lookup would try, in order."""
        return [path for _, path in self._resolver.candidates(kind, name)]

    def is_match(self, kind: ResourceKind | str, path: Path) -> bool:
        """Whether a candidate path would be accepted for this kind."""
        return self._resolver.is_match(kind, path)

    def list(self, kind: ResourceKind | str) -> list[ListedEntry]:
        """List every resource of a kind, one entry per name, project first.

        Raises:
            UnsupportedOperationError: For assets
        """
        kind = ResourceKind.parse(kind)
        entries = self._scanner.scan(kind)
        self._log("list", kind, detail={"count": len(entries)})
        return entries

    def list_templates(self) -> list[ListedEntry]:
        return self.list(ResourceKind.TEMPLATE)

    def list_presets(self) -> list[ListedEntry]:
        return self.list(ResourceKind.PRESET)

    def list_csl_styles(self) -> list[ListedEntry]:
        return self.list(ResourceKind.CSL)

    def ensure_user_layout(self) -> list[Path]:
        """Create the user directory layout if it is missing.

        Raises:
            OSError: If a directory cannot be created
        """
        directories = ensure_user_layout(self._roots.user_dir)
        self._log_bootstrap(directories)
        return directories

    async def ensure_user_layout_async(self) -> list[Path]:
        """Awaitable form of ensure_user_layout."""
        directories = await ensure_user_layout_async(self._roots.user_dir)
        self._log_bootstrap(directories)
        return directories

    def render_listing(
        self,
        kind: ResourceKind | str,
        format: str = "json",
        include_location: bool = True
    ) -> str:
        """Render the listing of a kind as "json" or "yaml".

        Raises:
            ValueError: If format is not "json" or "yaml"
        """
        if format not in ("json", "yaml"):
            raise ValueError(
                f"Invalid format '{format}'. Must be 'json' or 'yaml'."
            )

        entries = self.list(kind)

        if format == "json":
            renderer = JSONRenderer()
        else:
            renderer = YAMLRenderer()
        return renderer.render(entries, include_location=include_location)

    def _log_bootstrap(self, directories: list[Path]) -> None:
        self._log(
            "bootstrap",
            None,
            path=str(self._roots.user_dir),
            detail={"directories": len(directories)},
        )

    def _log(
        self,
        event_kind: str,
        kind: ResourceKind | None,
        name: str | None = None,
        path: str | None = None,
        source: str | None = None,
        detail: dict | None = None,
    ) -> None:
        if self._audit_sink is None:
            return
        self._audit_sink.log(AuditEvent(
            ts=datetime.now(),
            kind=event_kind,
            resource_kind=kind.value if kind else None,
            name=name,
            path=path,
            source=source,
            detail=detail or {},
        ))
