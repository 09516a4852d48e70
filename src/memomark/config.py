"""Render configuration for memomark.

Configuration is an explicit, immutable value handed to every parse and
render call. There is no process-wide settings object: two renders with
different configs can run side by side without coordination.

Usage:
    from memomark import parse
    from memomark.config import RenderConfig

    widget = RenderConfig.for_widget(line_limit=8)
    doc = parse(source, config=widget)

    # Framework integration: plain dicts (settings files, user defaults)
    config = RenderConfig.from_dict({"chapter_numbering": False, "theme": "dark"})

"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from memomark.errors import ConfigError


class RenderMode(Enum):
    """Which consumer the pipeline is rendering for."""

    FULL = "full"  # Editor preview
    COMPACT = "compact"  # Home-screen widget
    PRINT = "print"  # Paginated print / PDF


@dataclass(frozen=True, slots=True)
class PageSetup:
    """Page geometry and type sizes for the print renderer.

    All values are PostScript points. Defaults describe an A4 page with
    a 20 pt side margin and 25 pt top margin.

    Attributes:
        width: Page width
        height: Page height
        margin_left: Left edge of the printable area
        margin_top: Top edge of the printable area
        printable_width: Width of the printable area
        printable_height: Height of the printable area
        bottom_reserve: Space kept free above the printable bottom
        element_spacing: Vertical gap after each element
        heading_base_size: Size that heading scales multiply
        body_font_size: Paragraph and list text size
        code_font_size: Code block text size
        line_spacing: Line height as a multiple of font size
        list_indent: Horizontal indent per list level

    """

    width: float = 595.0
    height: float = 842.0
    margin_left: float = 20.0
    margin_top: float = 25.0
    printable_width: float = 555.0
    printable_height: float = 792.0
    bottom_reserve: float = 20.0
    element_spacing: float = 1.0
    heading_base_size: float = 16.0
    body_font_size: float = 12.0
    code_font_size: float = 10.0
    line_spacing: float = 1.2
    list_indent: float = 20.0

    def __post_init__(self) -> None:
        for name in ("width", "height", "printable_width", "printable_height"):
            if getattr(self, name) <= 0:
                raise ConfigError(name, "must be positive")
        for name in ("heading_base_size", "body_font_size", "code_font_size", "line_spacing"):
            if getattr(self, name) <= 0:
                raise ConfigError(name, "must be positive")
        if self.margin_left < 0 or self.margin_top < 0:
            raise ConfigError("margin", "margins cannot be negative")
        if self.margin_left + self.printable_width > self.width:
            raise ConfigError("printable_width", "printable area exceeds the page width")
        if self.margin_top + self.printable_height > self.height:
            raise ConfigError("printable_height", "printable area exceeds the page height")
        if not 0 <= self.bottom_reserve < self.printable_height:
            raise ConfigError("bottom_reserve", "must fit inside the printable area")
        if self.element_spacing < 0 or self.list_indent < 0:
            raise ConfigError("element_spacing", "spacing cannot be negative")

    @property
    def printable_bottom(self) -> float:
        """Y coordinate (from the top) of the printable area's bottom edge."""
        return self.margin_top + self.printable_height

    @property
    def content_bottom(self) -> float:
        """Lowest Y an element may reach before a page break."""
        return self.printable_bottom - self.bottom_reserve

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> PageSetup:
        """Create PageSetup from a dictionary, ignoring unknown keys."""
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Passed explicitly into each parse and render call. Frozen, so a
    single instance can be shared by any number of renders.

    Attributes:
        mode: Target consumer (full preview, compact widget, print)
        line_limit: Keep only the first N raw source lines (None = all)
        preserve_blank_lines: Emit BlankLine blocks instead of skipping
        images_enabled: Emit Image blocks for image lines
        chapter_numbering: Prefix headings with chapter numbers
        base_font_size: Body size that heading scales multiply
        indent_width: Points of indentation per list level
        max_blocks: Cap on rendered blocks for compact output (None = no cap)
        page: Print geometry (used by the print renderer only)

    """

    mode: RenderMode = RenderMode.FULL
    line_limit: int | None = None
    preserve_blank_lines: bool = False
    images_enabled: bool = False
    chapter_numbering: bool = True
    base_font_size: float = 16.0
    indent_width: float = 20.0
    max_blocks: int | None = None
    page: PageSetup = field(default_factory=PageSetup)

    def __post_init__(self) -> None:
        if not isinstance(self.mode, RenderMode):
            raise ConfigError("mode", f"expected RenderMode, got {self.mode!r}")
        if self.line_limit is not None and self.line_limit < 0:
            raise ConfigError("line_limit", "cannot be negative")
        if self.max_blocks is not None and self.max_blocks < 1:
            raise ConfigError("max_blocks", "must be at least 1")
        if self.base_font_size <= 0:
            raise ConfigError("base_font_size", "must be positive")
        if self.indent_width < 0:
            raise ConfigError("indent_width", "cannot be negative")

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Useful when settings come from outside Python (user defaults,
        JSON settings files). Only keys that are RenderConfig fields are
        used; unknown keys are silently ignored. ``mode`` may be given as
        its string value and ``page`` as a nested dict.

        Args:
            config_dict: Dictionary with config values

        Returns:
            New RenderConfig instance with values from dict.

        Raises:
            ConfigError: If a value is out of range or ``mode`` is unknown

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "mode": "compact",
            ...     "line_limit": 5,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.line_limit
            5

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        mode = filtered.get("mode")
        if isinstance(mode, str):
            try:
                filtered["mode"] = RenderMode(mode)
            except ValueError:
                raise ConfigError("mode", f"unknown render mode {mode!r}") from None

        page = filtered.get("page")
        if isinstance(page, dict):
            filtered["page"] = PageSetup.from_dict(page)

        return cls(**filtered)

    def replace(self, **changes: Any) -> RenderConfig:
        """Return a copy with the given fields changed (validated again)."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def for_preview(cls, **overrides: Any) -> RenderConfig:
        """Config for the full editor preview: blank lines and images kept."""
        options: dict[str, Any] = {
            "mode": RenderMode.FULL,
            "preserve_blank_lines": True,
            "images_enabled": True,
        }
        options.update(overrides)
        return cls(**options)

    @classmethod
    def for_widget(cls, line_limit: int | None = None, **overrides: Any) -> RenderConfig:
        """Config for the compact widget: truncated, no images, no chapters."""
        options: dict[str, Any] = {
            "mode": RenderMode.COMPACT,
            "line_limit": line_limit,
            "images_enabled": False,
            "preserve_blank_lines": False,
            "chapter_numbering": False,
            "base_font_size": 14.0,
            "indent_width": 16.0,
        }
        options.update(overrides)
        return cls(**options)

    @classmethod
    def for_print(cls, **overrides: Any) -> RenderConfig:
        """Config for paginated print output with chapter numbers."""
        options: dict[str, Any] = {
            "mode": RenderMode.PRINT,
            "chapter_numbering": True,
            "preserve_blank_lines": True,
        }
        options.update(overrides)
        return cls(**options)


DEFAULT_CONFIG: RenderConfig = RenderConfig()
