from __future__ import annotations

from enum import StrEnum


class StyleAttribute(StrEnum):
    """Fixed set of style keys understood by the rendering layer.

    The enum value is the key used in the persisted config.
    """

    # colours
    TITLE = "title"
    COMMENT = "comment"
    BACKGROUND = "background"
    HIGHLIGHT = "highlight"
    MATCH = "match"
    # fonts
    REGULAR = "regular"
    BOLD = "bold"
    SMALL_REGULAR = "smallregular"
    SMALL_BOLD = "smallbold"
    LARGE = "large"


DEFAULT_STYLE: dict[StyleAttribute, str] = {
    StyleAttribute.TITLE: "#111111",
    StyleAttribute.COMMENT: "#999999",
    StyleAttribute.BACKGROUND: "#ffffff",
    StyleAttribute.HIGHLIGHT: "#f8c291",
    StyleAttribute.MATCH: "#111111",
    StyleAttribute.REGULAR: "Ubuntu,sans-11",
    StyleAttribute.BOLD: "Ubuntu,sans-11:bold",
    StyleAttribute.SMALL_REGULAR: "Ubuntu,sans-10",
    StyleAttribute.SMALL_BOLD: "Ubuntu,sans-10:bold",
    StyleAttribute.LARGE: "Ubuntu,sans-20:light",
}


def default_style() -> dict[StyleAttribute, str]:
    """Return a fresh, mutable copy of the default style map."""
    return dict(DEFAULT_STYLE)
