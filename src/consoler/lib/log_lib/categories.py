"""
Built-in message categories and their presentation.

A category is the unit of gating: the operator enables categories, and
each dispatch names exactly one. Comparison is case-insensitive and the
canonical form is uppercase.

Built-in categories:
    INFO      log()       #03a9f4
    WARN      warn()      #ffc107
    ERROR     error()     #f55656
    SUCCESS   success()   #19c720

Callers add their own categories as tags (see tags.py).
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional


LABEL_PREFIX = "consoler:"


@dataclass(frozen=True)
class Category:
    """Presentation data for a built-in category."""
    name: str
    color: str
    marker: str
    title: str


INFO = Category('INFO', '#03a9f4', '\U0001F535', 'Info')
WARN = Category('WARN', '#ffc107', '\U0001F7E0', 'Warn')
ERROR = Category('ERROR', '#f55656', '\U0001F534', 'Error')
SUCCESS = Category('SUCCESS', '#19c720', '\U0001F7E2', 'Success')

# Order matters: it is the prompt order and the match alternation order
BUILTIN_CATEGORIES: Dict[str, Category] = {
    c.name: c for c in (INFO, WARN, ERROR, SUCCESS)
}

TAG_MARKER = '\U0001F680'


def normalize(category: str) -> str:
    """Return the canonical (uppercase) form of a category name."""
    return str(category).upper()


def known_names(tag_names: Optional[Iterable[str]] = None) -> List[str]:
    """Built-in names followed by tag names, all canonical."""
    names = list(BUILTIN_CATEGORIES)
    if tag_names:
        names.extend(normalize(name) for name in tag_names)
    return names


def category_pattern(tag_names: Optional[Iterable[str]] = None) -> re.Pattern:
    """Compile the alternation used to pick categories out of free text.

    Each name is escaped, so tag names containing regex metacharacters
    match literally.
    """
    alternatives = '|'.join(f'({re.escape(name)})' for name in known_names(tag_names))
    return re.compile(alternatives)


def extract_categories(text: Optional[str],
                       tag_names: Optional[Iterable[str]] = None) -> List[str]:
    """Find every known category in operator input, in order of appearance.

    The input is uppercased first. Returns an empty list when nothing
    matches (or when there is no input at all).
    """
    if not text:
        return []
    pattern = category_pattern(tag_names)
    return [m.group(0) for m in pattern.finditer(text.upper())]


def format_prompt(tag_names: Optional[Iterable[str]] = None) -> str:
    """Build the operator prompt listing every selectable category."""
    builtins = '       '.join(f"{c.marker} {c.title}" for c in BUILTIN_CATEGORIES.values())
    message = (
        "Enter verbose mode? options:(ex:'warn,Info,..'): \n "
        f"{builtins} \n"
    )
    tag_names = list(tag_names or [])
    if tag_names:
        message += " available tags: \n " + ''.join(
            f"{TAG_MARKER} {normalize(name)} \n" for name in tag_names
        )
    return message


def format_category_list(tag_names: Optional[Iterable[str]] = None,
                         enabled: Optional[Iterable[str]] = None) -> str:
    """Format known categories for display, flagging the enabled ones.

    Returns:
        Formatted string listing built-ins then tags.
    """
    enabled = {normalize(e) for e in (enabled or [])}
    names = known_names(tag_names)
    width = max(len(name) for name in names)
    lines = ["Available categories:"]
    for name in names:
        kind = 'built-in' if name in BUILTIN_CATEGORIES else 'tag'
        flag = " (enabled)" if name in enabled else ""
        lines.append(f"  {name:<{width}}  {kind}{flag}")
    return "\n".join(lines)
