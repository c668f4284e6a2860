"""Filename conventions for each resource kind."""

from dataclasses import dataclass

from pandoc_resources.models import ResourceKind


@dataclass(frozen=True)
class KindConvention:
    """How names of one resource kind map onto files.

    Attributes:
        subdir: Directory under each pandoc root ("" means the root itself)
        extension: Implicit extension, if any
        append_when_dotless: Only add the extension when the name has no "."
            (templates); otherwise it is added unless already present
        canonical_file: File looked up inside a directory of the same name
        nested_dirs: Extra groupings searched below ``subdir``
    """
    subdir: str
    extension: str | None = None
    append_when_dotless: bool = False
    canonical_file: str | None = None
    nested_dirs: tuple[str, ...] = ()

    def filename(self, name: str) -> str:
        """Apply the extension rule for kinds that always carry their suffix."""
        if self.extension is None or self.append_when_dotless:
            return name
        if name.endswith(self.extension):
            return name
        return name + self.extension

    def strip_extension(self, filename: str) -> str:
        if self.extension and filename.endswith(self.extension):
            return filename[: -len(self.extension)]
        return filename


TEMPLATE_CANONICAL_FILE = "template.latex"

CONVENTIONS: dict[ResourceKind, KindConvention] = {
    ResourceKind.TEMPLATE: KindConvention(
        subdir="templates",
        extension=".latex",
        append_when_dotless=True,
        canonical_file=TEMPLATE_CANONICAL_FILE,
    ),
    ResourceKind.PRESET: KindConvention(
        subdir="presets",
        extension=".yaml",
        nested_dirs=("organizations",),
    ),
    ResourceKind.CSL: KindConvention(
        subdir="csl",
        extension=".csl",
    ),
    ResourceKind.ASSET: KindConvention(subdir=""),
}


def convention_for(kind: ResourceKind) -> KindConvention:
    return CONVENTIONS[kind]
