"""Path resolution for pandoc resources across the project and user roots."""

from pathlib import Path

from pandoc_resources.exceptions import ResourceNotFoundError
from pandoc_resources.models import Provenance, ResolvedPath, ResourceKind, SearchRoots
from pandoc_resources.resources.conventions import KindConvention, convention_for


class ResourceResolver:
    """Maps a logical resource name to at most one file on disk.

    The project pandoc directory is searched before the user one. Within a
    root, candidates are tried in convention order: exact name, implicit
    extension, canonical file inside a same-named directory, then nested
    groupings. Assets get one more chance at the project root itself.
    """

    def __init__(self, roots: SearchRoots):
        """Initialize with fixed search roots.

        Args:
            roots: The project and user roots to search
        """
        self.roots = roots

    def candidates(self, kind: ResourceKind | str, name: str) -> list[tuple[Provenance, Path]]:
        """Return every path ``resolve`` would try, in order.

        Absolute names produce a single candidate tagged ``user``.
        """
        kind = ResourceKind.parse(kind)
        name = str(name)

        if Path(name).is_absolute():
            return [(Provenance.USER, Path(name))]

        convention = convention_for(kind)
        ordered = []
        for source, pandoc_dir in self.roots.ordered():
            for path in self._root_candidates(pandoc_dir, convention, name):
                ordered.append((source, path))

        # Assets only: the project root itself is the last candidate
        if kind is ResourceKind.ASSET and self.roots.project_root is not None:
            ordered.append((Provenance.PROJECT, self.roots.project_root / name))

        return ordered

    def resolve(self, kind: ResourceKind | str, name: str) -> ResolvedPath | None:
        """Resolve a resource name to a file.

        Args:
            kind: Resource kind (enum member or its string value)
            name: Logical name, relative path, or absolute path

        Returns:
            ResolvedPath for the first existing candidate, or None when
            nothing matches. Absolute paths are returned as-is iff they exist.
        """
        kind = ResourceKind.parse(kind)
        name = str(name)
        if Path(name).is_absolute():
            path = Path(name)
            return ResolvedPath(path=path, source=Provenance.USER) if path.exists() else None

        for source, path in self.candidates(kind, name):
            if self.is_match(kind, path):
                return ResolvedPath(path=path, source=source)
        return None

    @staticmethod
    def is_match(kind: ResourceKind | str, path: Path) -> bool:
        """Whether a candidate path satisfies a lookup of this kind.

        Templates, presets and styles must be regular files. Assets may be
        any existing path, directories included.
        """
        if ResourceKind.parse(kind) is ResourceKind.ASSET:
            return path.exists()
        return path.is_file()

    def require(self, kind: ResourceKind | str, name: str) -> ResolvedPath:
        """Resolve a resource that the caller cannot do without.

        Raises:
            ResourceNotFoundError: If no candidate exists
        """
        resolved = self.resolve(kind, name)
        if resolved is None:
            kind = ResourceKind.parse(kind)
            searched = [str(path) for _, path in self.candidates(kind, name)]
            raise ResourceNotFoundError(kind.value, str(name), searched)
        return resolved

    def resolve_template(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.TEMPLATE, name)

    def resolve_preset(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.PRESET, name)

    def resolve_csl(self, name: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.CSL, name)

    def resolve_asset(self, path: str) -> ResolvedPath | None:
        return self.resolve(ResourceKind.ASSET, path)

    @staticmethod
    def _root_candidates(pandoc_dir: Path, convention: KindConvention, name: str) -> list[Path]:
        base_dir = pandoc_dir / convention.subdir if convention.subdir else pandoc_dir

        if convention.append_when_dotless:
            exact = base_dir / name
            paths = [exact]
            if convention.extension and "." not in name:
                paths.append(Path(f"{exact}{convention.extension}"))
            if convention.canonical_file:
                paths.append(exact / convention.canonical_file)
            return paths

        filename = convention.filename(name)
        paths = [base_dir / filename]
        for nested in convention.nested_dirs:
            paths.append(base_dir / nested / filename)
        return paths
