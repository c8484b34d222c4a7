"""Built-in colour themes."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class ThemeSpec:
    name: str
    background: str
    lived: str
    future: str
    current: str
    text: str
    text_secondary: str

    @property
    def completed(self) -> str:
        """Year-mode name for the lived colour."""
        return self.lived


DEFAULT_THEME_NAME = "dark"

THEMES: Mapping[str, ThemeSpec] = MappingProxyType({
    "dark": ThemeSpec(
        name="dark",
        background="#000000",
        lived="#FFFFFF",
        future="#333333",
        current="#FF0000",
        text="#FFFFFF",
        text_secondary="#888888",
    ),
    "light": ThemeSpec(
        name="light",
        background="#FFFFFF",
        lived="#000000",
        future="#CCCCCC",
        current="#00A8FF",
        text="#000000",
        text_secondary="#666666",
    ),
})


def supported_theme_names() -> tuple[str, ...]:
    """Return supported theme names in deterministic order."""
    return tuple(THEMES.keys())


def resolve_theme(name: str | None) -> ThemeSpec:
    """Look up a theme by exact name, falling back to the dark theme."""
    if not name:
        return THEMES[DEFAULT_THEME_NAME]
    return THEMES.get(name, THEMES[DEFAULT_THEME_NAME])
