from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict


@dataclass(frozen=True)
class PlatformTarget:
    """
    UI toolkit a generated view is written against.
    Only changes the view file; the other four are toolkit agnostic.
    """
    key: str
    display_name: str

    toolkit_import: str = ""
    view_base: str = ""
    # extra constructor parameters after view_state, including the leading ", "
    init_params: str = ""
    super_init: str = ""

    # statement scheduling the first render
    render_call: str = "self._render()"
    defers_render: bool = False


PLATFORMS: Dict[str, PlatformTarget] = {
    "tkinter": PlatformTarget(
        key="tkinter",
        display_name="Tkinter",
        toolkit_import="import tkinter as tk",
        view_base="tk.Frame",
        init_params=", master: Optional[tk.Misc] = None",
        super_init="super().__init__(master)",
        render_call="self.after_idle(self._render)",
        defers_render=True,
    ),
    "qt": PlatformTarget(
        key="qt",
        display_name="Qt",
        toolkit_import="from PySide6.QtCore import QTimer\nfrom PySide6.QtWidgets import QWidget",
        view_base="QWidget",
        init_params=", parent: Optional[QWidget] = None",
        super_init="super().__init__(parent)",
        render_call="QTimer.singleShot(0, self._render)",
        defers_render=True,
    ),
    "console": PlatformTarget(
        key="console",
        display_name="Console",
    ),
}

DEFAULT_PLATFORM = "tkinter"


@dataclass(frozen=True)
class GenerateConfig:
    name: str
    output: Path
    platform: str = DEFAULT_PLATFORM

    # write straight into `output` instead of `output/<ModuleName>`
    exclude_directory: bool = False

    @property
    def module_name(self) -> str:
        return self.name[:1].upper() + self.name[1:]

    @property
    def destination(self) -> Path:
        if self.exclude_directory:
            return Path(self.output)
        return Path(self.output) / self.module_name
