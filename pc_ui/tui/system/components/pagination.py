"""Circular pagination of rendered choice lists."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeAlias

logger = logging.getLogger(__name__)

RenderFunc: TypeAlias = Callable[..., str]

DEFAULT_PAGE_SIZE = 7
# Rows kept above the pointer once the window starts scrolling.
POINTER_OFFSET = 3


def paginate_output(render: RenderFunc, page_size: int = DEFAULT_PAGE_SIZE) -> RenderFunc:
    """Wrap ``render`` so its output is cut down to a window of ``page_size`` lines.

    The wrapped function takes the pointer (cursor row) as first argument and
    forwards every argument to ``render`` unchanged. Output that already fits
    is returned as-is. Longer output is repeated three times so the window can
    scroll past either end and show the list as if it wrapped around forever.
    Nothing is remembered between calls.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    def paginated(pointer: int, *args: Any, **kwargs: Any) -> str:
        output = render(pointer, *args, **kwargs)
        lines = output.split("\n")

        if len(lines) <= page_size:
            return output

        infinite = lines * 3
        top_index = max(0, pointer + len(lines) - POINTER_OFFSET)
        logger.debug(
            "Paginating %d lines at pointer %d from top index %d",
            len(lines),
            pointer,
            top_index,
        )
        return "\n".join(infinite[top_index : top_index + page_size])

    return paginated
