"""
Caller-declared tags.

A tag is a custom category with its own label color. Each registered tag
becomes a dispatch function with the same shape as the built-in ones::

    consoler = Consoler(..., tags=[Tag('Network', '#8e44ad')])
    consoler.tags['Network']("socket opened", addr)

Colors are validated once, when the mapping is built. One bad color fails
the whole build, so a facade is never left with a partial registry.
Duplicate display names overwrite silently: the last tag wins.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable


HEX_COLOR = re.compile(r'^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')


class TagColorError(ValueError):
    """A tag was declared with a color that is not a hex value."""

    def __init__(self, tag: 'Tag'):
        self.tag = tag
        super().__init__(
            f"Tag color is not hex: {tag.display_name!r} has color {tag.color!r}"
        )


@dataclass(frozen=True)
class Tag:
    """A custom category.

    Attributes:
        display_name: Name used in labels, prompts and the tags mapping
        color: 3 or 6 hex digits, '#' optional (e.g. '#0af', '00aaff')
    """
    display_name: str
    color: str

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'Tag':
        """Build a Tag from a config entry ({"display_name", "color"})."""
        return cls(display_name=data['display_name'], color=data['color'])


def is_hex(color: str) -> bool:
    """True for '#abc', 'abc', '#aabbcc' or 'aabbcc' (any case)."""
    return isinstance(color, str) and HEX_COLOR.fullmatch(color) is not None


TagFunction = Callable[..., None]
Dispatch = Callable[..., None]


def _make_tag_function(tag: Tag, dispatch: Dispatch) -> TagFunction:
    def tag_function(message: Any = None, *params: Any) -> None:
        dispatch(tag.display_name, tag.color, message, *params)
    tag_function.__name__ = f"tag_{tag.display_name}"
    tag_function.__doc__ = f"Dispatch a message under the {tag.display_name!r} tag."
    return tag_function


def build_tag_functions(tags: Iterable[Tag], dispatch: Dispatch) -> Dict[str, TagFunction]:
    """Map each tag's display name to its dispatch function.

    Args:
        tags: Tags in registration order
        dispatch: Callable(category, color, message, *params) that does the
            gating and emission

    Returns:
        Dict keyed by display name

    Raises:
        TagColorError: If any tag has a non-hex color. Raised before any
            function is created.
    """
    tags = list(tags)
    for tag in tags:
        if not is_hex(tag.color):
            raise TagColorError(tag)

    functions: Dict[str, TagFunction] = {}
    for tag in tags:
        functions[tag.display_name] = _make_tag_function(tag, dispatch)
    return functions
