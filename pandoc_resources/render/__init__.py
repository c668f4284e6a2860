"""Renderers for resource listings."""

from pandoc_resources.render.json_renderer import JSONRenderer
from pandoc_resources.render.yaml_renderer import YAMLRenderer

__all__ = ["JSONRenderer", "YAMLRenderer"]
