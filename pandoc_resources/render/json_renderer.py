"""JSON listing renderer for pandoc-resources."""

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pandoc_resources.models import ListedEntry


class JSONRenderer:
    """Renders listed resources as a JSON array.

    Produces JSON output in the format:
    [
      {"name": "...", "source": "project", "path": "..."},
      ...
    ]
    """

    def render(
        self,
        entries: list["ListedEntry"],
        include_location: bool = True
    ) -> str:
        """Render entries as a JSON array.

        Args:
            entries: Listed entries to render
            include_location: Whether to include the filesystem path

        Returns:
            JSON string
        """
        items = []
        for entry in entries:
            item = {
                "name": entry.name,
                "source": entry.source.value,
            }
            if include_location:
                item["path"] = str(entry.path)
            items.append(item)

        return json.dumps(items, indent=2, ensure_ascii=False)
