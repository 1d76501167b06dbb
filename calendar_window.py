"""Single-month calendar window (tkinter) rendering a CalendarState."""

import logging
from datetime import MAXYEAR, MINYEAR, date
from tkinter import font as tkfont
import tkinter as tk

from PIL import ImageTk

from calendar_logic import (
    EMPTY,
    InvalidInput,
    grid_rows,
    is_same_day,
    long_date_display,
    month_display_name,
    month_grid,
    shift_month,
    weekday_labels,
    year_display_name,
)
from calendar_state import CalendarState
from icon_gen import ACCENT, create_today_button_image
from settings import load_settings

logger = logging.getLogger(__name__)

# Colours
LIGHT = {
    "bg": "white", "fg": "#333333", "weekend": "#CC0000",
    "today_bg": "#D6D6D6", "sel_bg": ACCENT, "sel_fg": "white",
}
DARK = {
    "bg": "#202020", "fg": "#E6E6E6", "weekend": "#FF6B6B",
    "today_bg": "#4A4A4A", "sel_bg": ACCENT, "sel_fg": "white",
}

MAX_WEEKS = 6


class CalendarWindow:
    """One month at a time: year, month navigation, weekday header, days, footer."""

    def __init__(self, state: CalendarState | None = None,
                 settings: dict | None = None, close_to_tray: bool = False) -> None:
        if settings is None:
            settings = load_settings()
        self.first_weekday: int = settings["first_weekday"]
        self.locale: str | None = settings["locale"]
        self.colors = DARK if settings["dark_mode"] else LIGHT
        self.state = state or CalendarState()
        self._close_to_tray = close_to_tray

        self.root = tk.Tk()
        self.root.title("Mini Calendar")
        self.root.resizable(False, False)
        self.root.configure(bg=self.colors["bg"])

        self._setup_fonts()

        # Widget-to-date mapping (filled during render)
        self._widget_dates: dict[int, date] = {}
        self._build_shell()

        self._unsubscribe = self.state.subscribe(lambda _state: self.render())
        self.render()

        self.root.bind("<Left>", lambda _e: self.navigate(-1))
        self.root.bind("<Right>", lambda _e: self.navigate(1))
        self.root.bind("<Home>", lambda _e: self.state.reset_to_today())
        self.root.bind("<Escape>", lambda _e: self._on_close())
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=10)
        self.font_bold = tkfont.Font(family=base, size=10, weight="bold")
        self.font_caption = tkfont.Font(family=base, size=8)
        self.font_title = tkfont.Font(family=base, size=16, weight="bold")
        self.font_header = tkfont.Font(family=base, size=11, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=14, weight="bold")

    # ------------------------------------------------------------------
    # Build shell (once) — year, nav row, weekdays, day pool, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        c = self.colors
        outer = tk.Frame(self.root, bg=c["bg"])
        outer.pack(padx=10, pady=8)

        self.year_label = tk.Label(outer, font=self.font_title, bg=c["bg"], fg=c["fg"])
        self.year_label.pack()

        # Navigation row: ◀  Month  ▶
        nav = tk.Frame(outer, bg=c["bg"])
        nav.pack(fill="x", pady=(0, 4))

        btn_prev = tk.Label(
            nav, text="◀", font=self.font_nav, bg=c["bg"], fg=ACCENT, cursor="hand2"
        )
        btn_prev.pack(side="left", padx=6)
        btn_prev.bind("<Button-1>", lambda _e: self.navigate(-1))

        btn_next = tk.Label(
            nav, text="▶", font=self.font_nav, bg=c["bg"], fg=ACCENT, cursor="hand2"
        )
        btn_next.pack(side="right", padx=6)
        btn_next.bind("<Button-1>", lambda _e: self.navigate(1))

        self.month_label = tk.Label(nav, font=self.font_header, bg=c["bg"], fg=c["fg"])
        self.month_label.pack(side="left", expand=True)

        grid = tk.Frame(outer, bg=c["bg"])
        grid.pack()

        self.weekday_headers: list[tk.Label] = []
        for col, abbr in enumerate(weekday_labels(self.first_weekday, self.locale)):
            fg = c["weekend"] if self._is_weekend_column(col) else c["fg"]
            lbl = tk.Label(grid, text=abbr, font=self.font_caption, bg=c["bg"], fg=fg, width=4)
            lbl.grid(row=0, column=col)
            self.weekday_headers.append(lbl)

        self.day_labels: list[tk.Label] = []
        for r in range(MAX_WEEKS):
            for col in range(7):
                lbl = tk.Label(grid, font=self.font_normal, bg=c["bg"], fg=c["fg"],
                               width=4, pady=4)
                lbl.grid(row=r + 1, column=col, padx=1, pady=1)
                lbl.bind("<Button-1>", self._on_day_click)
                self.day_labels.append(lbl)

        self.footer_label = tk.Label(outer, font=self.font_normal, bg=c["bg"], fg=c["fg"])
        self.footer_label.pack(pady=(8, 0))

        # PhotoImage must stay referenced or tk drops it
        self._today_image = ImageTk.PhotoImage(create_today_button_image(), master=self.root)
        self.today_button = tk.Label(
            outer, image=self._today_image, bg=c["bg"], cursor="hand2",
        )
        self.today_button.pack(pady=(6, 0))
        self.today_button.bind("<Button-1>", lambda _e: self.state.reset_to_today())

    def _is_weekend_column(self, col: int) -> bool:
        return (self.first_weekday + col) % 7 >= 5

    # ------------------------------------------------------------------
    # Render from state (called after every transition)
    # ------------------------------------------------------------------
    def render(self) -> None:
        c = self.colors
        year, month = self.state.viewed_year, self.state.viewed_month
        selected = self.state.selected_date
        today = self.state.today()

        try:
            rows = grid_rows(month_grid(year, month, self.first_weekday))
        except InvalidInput as exc:
            logger.warning("Cannot render %04d-%02d: %s", year, month, exc)
            return

        self.year_label.configure(text=year_display_name(year))
        self.month_label.configure(text=month_display_name(year, month, self.locale))

        self._widget_dates.clear()
        for r in range(MAX_WEEKS):
            week = rows[r] if r < len(rows) else []
            for col in range(7):
                label = self.day_labels[r * 7 + col]
                cell = week[col] if col < len(week) else EMPTY
                if cell.is_empty:
                    label.configure(text="", bg=c["bg"], cursor="")
                    continue
                is_today = is_same_day(cell.date, today)
                if is_same_day(cell.date, selected):
                    bg, fg = c["sel_bg"], c["sel_fg"]
                elif is_today:
                    bg, fg = c["today_bg"], c["fg"]
                else:
                    bg = c["bg"]
                    fg = c["weekend"] if self._is_weekend_column(col) else c["fg"]
                label.configure(
                    text=str(cell.day), bg=bg, fg=fg, cursor="hand2",
                    font=self.font_bold if is_today else self.font_normal,
                )
                self._widget_dates[id(label)] = cell.date

        self.footer_label.configure(
            text=f"Selected Date: {long_date_display(selected, self.locale)}"
        )

    def navigate(self, delta: int) -> None:
        """Page months, stopping at the first and last month a date can have."""
        year, _month = shift_month(self.state.viewed_year, self.state.viewed_month, delta)
        if not MINYEAR <= year <= MAXYEAR:
            logger.info("Already at the edge of the calendar, not paging to year %d", year)
            return
        self.state.advance_month(delta)

    def _on_day_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d:
            self.state.select_date(d)

    # ------------------------------------------------------------------
    # Show / Hide / Toggle / Close
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.deiconify()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        self.root.withdraw()

    def close(self) -> None:
        self._unsubscribe()
        self.root.destroy()

    def _on_close(self) -> None:
        if self._close_to_tray:
            self.hide()
        else:
            self.close()
