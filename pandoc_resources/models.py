"""Data models for pandoc-resources."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Mapping


PROJECT_SUBPATH = Path(".opencode") / "pandoc"
USER_SUBPATH = Path("opencode") / "pandoc"


class ResourceKind(Enum):
    """Kinds of resources the resolver knows how to locate."""
    TEMPLATE = "template"
    PRESET = "preset"
    CSL = "csl"
    ASSET = "asset"

    @classmethod
    def parse(cls, value: "ResourceKind | str") -> "ResourceKind":
        """Accept an enum member, its value, or a common alias.

        Raises:
            ValueError: If the value names no known kind.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        aliases = {
            "templates": cls.TEMPLATE,
            "presets": cls.PRESET,
            "style": cls.CSL,
            "styles": cls.CSL,
            "csl-style": cls.CSL,
            "csl-styles": cls.CSL,
            "assets": cls.ASSET,
        }
        if key in aliases:
            return aliases[key]
        return cls(key)


class Provenance(Enum):
    """Which search root satisfied a lookup."""
    PROJECT = "project"
    USER = "user"


def default_config_base(environ: Mapping[str, str] | None = None) -> Path:
    """Return the user config base directory.

    ``$XDG_CONFIG_HOME`` wins when it is set to an absolute path; anything
    else falls back to ``~/.config``.
    """
    env = os.environ if environ is None else environ
    raw = (env.get("XDG_CONFIG_HOME") or "").strip()
    if raw and Path(raw).is_absolute():
        return Path(raw)
    return Path.home() / ".config"


@dataclass(frozen=True)
class SearchRoots:
    """The two directories every lookup is searched against.

    ``project_root`` is the project itself (may be None); the pandoc
    directories are derived from it and from ``user_dir``.
    """
    project_root: Path | None
    user_dir: Path

    @property
    def project_dir(self) -> Path | None:
        if self.project_root is None:
            return None
        return self.project_root / PROJECT_SUBPATH

    def ordered(self) -> list[tuple["Provenance", Path]]:
        """Return ``(provenance, pandoc_dir)`` pairs, project first."""
        roots = []
        if self.project_dir is not None:
            roots.append((Provenance.PROJECT, self.project_dir))
        roots.append((Provenance.USER, self.user_dir))
        return roots

    @classmethod
    def from_environment(
        cls,
        project_root: Path | str | None = None,
        environ: Mapping[str, str] | None = None,
        user_dir: Path | str | None = None,
    ) -> "SearchRoots":
        """Build roots from an explicit project root or the working directory.

        This is the only place the process environment is consulted. An
        explicit ``user_dir`` skips the config-base lookup entirely.
        """
        root = Path(project_root).expanduser() if project_root else Path.cwd()
        if user_dir is not None:
            user = Path(user_dir).expanduser().absolute()
        else:
            user = default_config_base(environ) / USER_SUBPATH
        return cls(project_root=root.absolute(), user_dir=user)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "project_root": str(self.project_root) if self.project_root else None,
            "project_dir": str(self.project_dir) if self.project_dir else None,
            "user_dir": str(self.user_dir),
        }


@dataclass(frozen=True)
class ResolvedPath:
    """Result of a successful lookup."""
    path: Path
    source: Provenance

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "path": str(self.path),
            "source": self.source.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ResolvedPath":
        """Deserialize from dict."""
        return cls(
            path=Path(data["path"]),
            source=Provenance(data["source"]),
        )


@dataclass(frozen=True)
class ListedEntry:
    """A single resource found while listing a kind."""
    name: str
    source: Provenance
    path: Path

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "name": self.name,
            "source": self.source.value,
            "path": str(self.path),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ListedEntry":
        """Deserialize from dict."""
        return cls(
            name=data["name"],
            source=Provenance(data["source"]),
            path=Path(data["path"]),
        )


@dataclass
class AuditEvent:
    """Record of a resolver operation."""
    ts: datetime
    kind: str  # "resolve", "list", "bootstrap", "error"
    resource_kind: str | None = None
    name: str | None = None
    path: str | None = None
    source: str | None = None
    detail: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dict."""
        return {
            "ts": self.ts.isoformat(),
            "kind": self.kind,
            "resource_kind": self.resource_kind,
            "name": self.name,
            "path": self.path,
            "source": self.source,
            "detail": self.detail,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuditEvent":
        """Deserialize from dict."""
        return cls(
            ts=datetime.fromisoformat(data["ts"]),
            kind=data["kind"],
            resource_kind=data.get("resource_kind"),
            name=data.get("name"),
            path=data.get("path"),
            source=data.get("source"),
            detail=data.get("detail", {}),
        )
