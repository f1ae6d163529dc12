from .popup_renderer import PopupRenderer, build_name_listing, build_word_listing, render_popup
from .selection import selected_index

__all__ = [
    "PopupRenderer",
    "build_name_listing",
    "build_word_listing",
    "render_popup",
    "selected_index",
]
