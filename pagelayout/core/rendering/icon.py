"""
Icons
=====

Inline SVG icons used by renderers and page nodes.
"""

from typing import Dict, Iterable, Optional

ICONS: Dict[str, str] = {
    "back": '<polygon points="3.828 9 9.899 2.929 8.485 1.515 0 10 .707 10.707 8.485 18.485 9.899 17.071 3.828 11 20 11 20 9 3.828 9"/>',
    "question": '<path d="M10 20a10 10 0 1 1 0-20 10 10 0 0 1 0 20zm2-13c0 .28-.21.8-.42 1L10 9.58c-.57.58-1 1.6-1 2.42v1h2v-1c0-.29.21-.8.42-1L13 9.42c.57-.58 1-1.6 1-2.42a4 4 0 1 0-8 0h2a2 2 0 1 1 4 0zm-3 8v2h2v-2H9z"/>',
    "copy": '<path d="M6 6V2c0-1.1.9-2 2-2h10a2 2 0 0 1 2 2v10a2 2 0 0 1-2 2h-4v4a2 2 0 0 1-2 2H2a2 2 0 0 1-2-2V8c0-1.1.9-2 2-2h4zm2 0h4a2 2 0 0 1 2 2v4h4V2H8v4zM2 8v10h10V8H2z"/>',
    "checkon": '<path d="M0 11l2-2 5 5L18 3l2 2L7 18z"/>',
    "checkoff": '<path d="M10 8.586L2.929 1.515 1.515 2.929 8.586 10l-7.071 7.071 1.414 1.414L10 11.414l7.071 7.071 1.414-1.414L11.414 10l7.071-7.071-1.414-1.414L10 8.586z"/>',
    "toggle": '<path d="M10 20a10 10 0 1 1 0-20 10 10 0 0 1 0 20zM7 6v8l6-4-6-4z"/>',
    "search": '<path d="M12.9 14.32a8 8 0 1 1 1.41-1.41l5.35 5.33-1.42 1.42-5.33-5.34zM8 14A6 6 0 1 0 8 2a6 6 0 0 0 0 12z"/>',
}


class Icon:
    """Render a named icon as an inline SVG element."""

    @staticmethod
    def render(name: str, css_class: Optional[str] = None, attrs: Iterable[str] = ()) -> str:
        """
        Render an icon.

        Args:
            name: Icon name (a key of ``ICONS``)
            css_class: Extra CSS classes for the svg element
            attrs: Pre-formatted extra attributes

        Returns:
            SVG markup

        Raises:
            ValueError: If the icon name is unknown
        """
        if name not in ICONS:
            raise ValueError(f"Unknown icon: {name}")

        classes = "cbl-icon" if not css_class else f"cbl-icon {css_class}"
        extra = " ".join(attrs)
        extra = f" {extra}" if extra else ""
        return (
            f'<svg class="{classes}"{extra} xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 20 20" width="1em" height="1em">{ICONS[name]}</svg>'
        )
