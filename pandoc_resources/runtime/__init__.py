"""Runtime module for the resources facade and layout bootstrap."""

from pandoc_resources.runtime.layout import USER_LAYOUT, ensure_user_layout, ensure_user_layout_async
from pandoc_resources.runtime.repository import PandocResources

__all__ = ["USER_LAYOUT", "ensure_user_layout", "ensure_user_layout_async", "PandocResources"]
