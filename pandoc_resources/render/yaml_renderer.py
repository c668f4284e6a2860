"""YAML listing renderer for pandoc-resources."""

from typing import TYPE_CHECKING

import yaml

if TYPE_CHECKING:
    from pandoc_resources.models import ListedEntry


class YAMLRenderer:
    """Renders listed resources as a YAML sequence.

    Entries keep their listing order (project entries first):

        - name: ieee
          source: project
          path: /work/paper/.opencode/pandoc/templates/ieee.latex
    """

    def render(
        self,
        entries: list["ListedEntry"],
        include_location: bool = True
    ) -> str:
        items = []
        for entry in entries:
            item = {
                "name": entry.name,
                "source": entry.source.value,
            }
            if include_location:
                item["path"] = str(entry.path)
            items.append(item)

        return yaml.safe_dump(
            items,
            sort_keys=False,
            allow_unicode=True,
            default_flow_style=False,
        )
