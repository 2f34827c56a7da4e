# ---------------------------------------------------------------------------
# File: tk_renderer.py
# ---------------------------------------------------------------------------
# Description:
#	Tk implementation of TooltipRenderer.
#
# Notes:
#	- One borderless Toplevel per slot, holding a ttk.Label.
#	- Label styling goes through ttkthemes.ThemedStyle so tooltips follow the
#	  host's ttk theme (or an explicit theme name).
#	- Timers use Tk's after()/after_cancel().
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 10/14/2026	Paul G. LeDuc				Initial coding / release
# 10/15/2026	Paul G. LeDuc				Theme tooltip labels via ttkthemes
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import ttk

import ttkthemes as ttk_themes


TOOLTIP_STYLE = "EzMenu.Tooltip.TLabel"


class TkTooltipRenderer:
	"""
	TkTooltipRenderer

	master:	Any Tk widget (usually the application root)
	theme:	Optional ttkthemes theme name applied when the style is created
	"""

	def __init__(
		self,
		master: tk.Misc,
		*,
		theme: str | None = None,
		style_name: str = TOOLTIP_STYLE,
		background: str = "#ffffe0",
		foreground: str = "#000000",
	) -> None:
		self._master = master
		self._theme = theme
		self._style_name = style_name
		self._colors = (background, foreground)
		self._style: Optional[ttk_themes.ThemedStyle] = None
		self._windows: dict[int, tuple[tk.Toplevel, ttk.Label]] = {}

	@property
	def style(self) -> ttk_themes.ThemedStyle:
		if self._style is None:
			style = ttk_themes.ThemedStyle(self._master)
			if self._theme and self._theme in style.get_themes():
				style.set_theme(self._theme)
			background, foreground = self._colors
			style.configure(
				self._style_name,
				background=background,
				foreground=foreground,
				relief="solid",
				borderwidth=1,
				padding=(4, 2),
			)
			self._style = style
		return self._style

	def render(self, text: str, x: int, y: int, slot: int) -> None:
		existing = self._windows.get(slot)
		if existing is not None:
			window, label = existing
			label.configure(text=text)
		else:
			window = tk.Toplevel(self._master)
			window.wm_overrideredirect(True)
			window.attributes("-topmost", True)
			label = ttk.Label(window, text=text, style=self._style_name, justify="left")
			label.pack()
			# Force style creation before the first draw.
			_ = self.style
			self._windows[slot] = (window, label)

		window.wm_geometry(f"+{int(x)}+{int(y)}")

	def clear(self, slot: int) -> None:
		existing = self._windows.pop(slot, None)
		if existing is None:
			return
		window, _label = existing
		window.destroy()

	def cursor_position(self) -> tuple[int, int]:
		x, y = self._master.winfo_pointerxy()
		return int(x), int(y)

	def schedule(self, delay_ms: int, callback: Callable[[], None]) -> Any:
		return self._master.after(int(delay_ms), callback)

	def cancel(self, handle: Any) -> None:
		self._master.after_cancel(handle)

	def visible_slots(self) -> list[int]:
		return list(self._windows)
