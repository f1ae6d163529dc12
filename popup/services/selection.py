from __future__ import annotations

from typing import Optional


def selected_index(copy_mode: bool, copy_index: Optional[int], entry_count: int) -> int:
    """Return the entry highlighted in copy mode, or ``-1`` for none.

    The cursor wraps around the entry count; negative cursors wrap from the
    end, so ``selected_index(True, -1, 3) == 2``.
    """

    if not copy_mode or copy_index is None or not entry_count:
        return -1
    return copy_index % entry_count
