"""Filesystem scanning for resource listing."""

import os
from datetime import datetime
from pathlib import Path

from pandoc_resources.exceptions import UnsupportedOperationError
from pandoc_resources.models import (
    AuditEvent,
    ListedEntry,
    Provenance,
    ResourceKind,
    SearchRoots,
)
from pandoc_resources.observability.audit import AuditSink
from pandoc_resources.resources.conventions import KindConvention, convention_for


class ResourceScanner:
    """Lists the resources of one kind available across both search roots.

    The project root is scanned first and the user root second. A name seen
    in the project root hides the user entry of the same name, so every name
    appears once per listing.

    A root whose directory is missing contributes nothing. A root whose
    directory cannot be read also contributes nothing; the fault is reported
    to the audit sink, never to the caller.
    """

    def __init__(self, roots: SearchRoots, audit_sink: AuditSink | None = None):
        self.roots = roots
        self._audit_sink = audit_sink

    def scan(self, kind: ResourceKind | str) -> list[ListedEntry]:
        """List all resources of a kind, project entries first.

        Args:
            kind: TEMPLATE, PRESET or CSL

        Returns:
            Deduplicated list of ListedEntry objects

        Raises:
            UnsupportedOperationError: If the kind is ASSET

        Example:
            >>> scanner = ResourceScanner(SearchRoots.from_environment())
            >>> for entry in scanner.scan(ResourceKind.TEMPLATE):
            ...     print(entry.name, entry.source.value)
        """
        kind = ResourceKind.parse(kind)
        if kind is ResourceKind.ASSET:
            raise UnsupportedOperationError("Assets are resolved by path and cannot be listed")

        convention = convention_for(kind)
        entries: list[ListedEntry] = []
        seen: set[str] = set()

        for source, pandoc_dir in self.roots.ordered():
            directory = pandoc_dir / convention.subdir
            for name, path in self._scan_root(kind, convention, directory):
                if name in seen:
                    continue
                seen.add(name)
                entries.append(ListedEntry(name=name, source=source, path=path))

        return entries

    def _scan_root(
        self,
        kind: ResourceKind,
        convention: KindConvention,
        directory: Path,
    ) -> list[tuple[str, Path]]:
        try:
            if not directory.is_dir():
                return []
            if kind is ResourceKind.TEMPLATE:
                return self._scan_templates(convention, directory)
            if kind is ResourceKind.PRESET:
                return self._scan_recursive(convention, directory)
            return self._scan_flat(convention, directory)
        except OSError as e:
            self._report_error(kind, directory, e)
            return []

    @staticmethod
    def _scan_templates(convention: KindConvention, directory: Path) -> list[tuple[str, Path]]:
        found = []
        for entry in sorted(directory.iterdir()):
            if entry.name.startswith("."):
                continue
            if entry.is_dir():
                canonical = entry / convention.canonical_file
                if canonical.is_file():
                    found.append((entry.name, canonical))
            elif entry.is_file() and entry.name.endswith(convention.extension):
                found.append((convention.strip_extension(entry.name), entry))
        return found

    @staticmethod
    def _scan_recursive(convention: KindConvention, directory: Path) -> list[tuple[str, Path]]:
        def fail(error: OSError) -> None:
            raise error

        # A subdirectory that cannot be read fails the whole root.
        paths = []
        for dirpath, _, filenames in os.walk(directory, onerror=fail):
            for filename in filenames:
                if filename.endswith(convention.extension):
                    paths.append(Path(dirpath) / filename)
        return [
            (convention.strip_extension(path.name), path)
            for path in sorted(paths)
            if path.is_file()
        ]

    @staticmethod
    def _scan_flat(convention: KindConvention, directory: Path) -> list[tuple[str, Path]]:
        found = []
        for entry in sorted(directory.iterdir()):
            if entry.name.startswith("."):
                continue
            if entry.is_file() and entry.name.endswith(convention.extension):
                found.append((convention.strip_extension(entry.name), entry))
        return found

    def _report_error(self, kind: ResourceKind, directory: Path, error: OSError) -> None:
        if self._audit_sink is None:
            return
        self._audit_sink.log(AuditEvent(
            ts=datetime.now(),
            kind="error",
            resource_kind=kind.value,
            path=str(directory),
            detail={
                "operation": "list",
                "error_type": type(error).__name__,
                "error_message": str(error),
            },
        ))
