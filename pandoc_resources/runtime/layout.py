"""Bootstrap of the user-global pandoc directory layout."""

import asyncio
from pathlib import Path


# Relative to the user pandoc directory; "" is the directory itself.
USER_LAYOUT: tuple[str, ...] = (
    "",
    "templates",
    "templates/ieee",
    "templates/acm",
    "templates/lncs",
    "templates/custom",
    "csl",
    "presets",
    "presets/organizations",
    "assets",
)


def ensure_user_layout(user_dir: Path) -> list[Path]:
    """Create the user pandoc directory and its known subdirectories.

    Safe to call repeatedly; existing directories are left alone.

    Args:
        user_dir: The user pandoc directory (e.g. ~/.config/opencode/pandoc)

    Returns:
        The directories of the layout, in creation order

    Raises:
        OSError: If a directory cannot be created. The user root is unusable
            in that case, so the error is not swallowed.
    """
    user_dir = Path(user_dir)
    created = []
    for relpath in USER_LAYOUT:
        directory = user_dir / relpath if relpath else user_dir
        directory.mkdir(parents=True, exist_ok=True)
        created.append(directory)
    return created


async def ensure_user_layout_async(user_dir: Path) -> list[Path]:
    """Awaitable form of ensure_user_layout, run in a worker thread."""
    return await asyncio.to_thread(ensure_user_layout, user_dir)
