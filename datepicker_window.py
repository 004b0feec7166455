"""Datepicker window (tkinter) rendering a DatepickerState."""

import tkinter as tk
from datetime import date
from tkinter import font as tkfont

import locale_names
from calendar_logic import SATURDAY, SUNDAY, day_of_year
from datepicker_state import DatepickerState
from settings import load_settings, save_settings

# Colours
ACCENT = "#0078D4"
SEL_BG = "#B3D7F2"
HEADER_BG = "#F3F3F3"
GRID_BG = "white"
WN_FG = "#888888"
OTHER_FG = "#AAAAAA"

MAX_ROWS = 6


class DatepickerWindow:
    """Single-month datepicker driving a :class:`DatepickerState`."""

    def __init__(self, state: DatepickerState, settings_path: str | None = None,
                 root: tk.Tk | None = None) -> None:
        self.state = state
        self._settings_path = settings_path
        self.root = root or tk.Tk()
        self.root.title(self._title())
        self.root.resizable(False, False)
        self.root.configure(bg=GRID_BG)
        self.root.attributes("-topmost", True)

        self._setup_fonts()

        # Label-to-date mapping (filled during _refresh)
        self._widget_dates: dict[int, date] = {}
        self._build_shell()
        self._refresh()

        self.state.subscribe(self._on_state_selection)

        self.root.bind("<Escape>", self._on_escape)
        self.root.protocol("WM_DELETE_WINDOW", self.hide)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Fonts
    # ------------------------------------------------------------------
    def _setup_fonts(self) -> None:
        families = tkfont.families(self.root)
        base = "Segoe UI" if "Segoe UI" in families else "TkDefaultFont"
        self.font_normal = tkfont.Font(family=base, size=9)
        self.font_bold = tkfont.Font(family=base, size=9, weight="bold")
        self.font_header = tkfont.Font(family=base, size=10, weight="bold")
        self.font_nav = tkfont.Font(family=base, size=12, weight="bold")
        self.font_wn = tkfont.Font(family=base, size=8)

    @staticmethod
    def _title() -> str:
        return f"Mini Datepicker  Day: {day_of_year(date.today())}"

    # ------------------------------------------------------------------
    # Build shell (once): nav bar, header, pooled day cells, footer
    # ------------------------------------------------------------------
    def _build_shell(self) -> None:
        outer = tk.Frame(self.root, bg=GRID_BG)
        outer.pack(padx=6, pady=4)

        # Navigation row: ◀◀  ◀  Today  ▶  ▶▶
        nav = tk.Frame(outer, bg=GRID_BG)
        nav.pack(fill="x", pady=(0, 2))
        buttons = (
            ("◀◀", "left", lambda _e: self._apply(self.state.navigate_year, -1)),
            ("◀", "left", lambda _e: self._apply(self.state.navigate, -1)),
            ("▶▶", "right", lambda _e: self._apply(self.state.navigate_year, 1)),
            ("▶", "right", lambda _e: self._apply(self.state.navigate, 1)),
        )
        for text, side, handler in buttons:
            btn = tk.Label(nav, text=text, font=self.font_nav, bg=GRID_BG, cursor="hand2")
            btn.pack(side=side, padx=6)
            btn.bind("<Button-1>", handler)
        btn_today = tk.Label(
            nav, text="Today", font=self.font_bold, bg=GRID_BG, fg=ACCENT, cursor="hand2",
        )
        btn_today.pack(side="left", padx=6)
        btn_today.bind("<Button-1>", lambda _e: self._apply(self.state.go_today))

        grid = tk.Frame(outer, bg=GRID_BG)
        grid.pack()
        self.header = tk.Label(grid, font=self.font_header, bg=HEADER_BG, fg="#333333")
        self.header.grid(row=0, column=0, columnspan=8, sticky="we", pady=(0, 2))

        tk.Label(grid, text="Wk", font=self.font_bold, bg=GRID_BG, fg=WN_FG,
                 width=3).grid(row=1, column=0)
        self.day_headers: list[tk.Label] = []
        for col in range(7):
            lbl = tk.Label(grid, font=self.font_bold, bg=GRID_BG, fg="#333333", width=3)
            lbl.grid(row=1, column=col + 1)
            self.day_headers.append(lbl)

        self.week_nums: list[tk.Label] = []
        self.day_cells: list[list[tk.Label]] = []
        for r in range(MAX_ROWS):
            wn = tk.Label(grid, font=self.font_wn, bg=GRID_BG, fg=WN_FG, width=3)
            wn.grid(row=r + 2, column=0)
            self.week_nums.append(wn)
            row_cells: list[tk.Label] = []
            for c in range(7):
                cell = tk.Label(grid, font=self.font_normal, bg=GRID_BG, width=3)
                cell.grid(row=r + 2, column=c + 1)
                cell.bind("<Button-1>", self._on_click)
                row_cells.append(cell)
            self.day_cells.append(row_cells)

        self.footer = tk.Label(outer, font=self.font_normal, bg=GRID_BG, fg="#555555")
        self.footer.pack(pady=(4, 0))

    # ------------------------------------------------------------------
    # Refresh labels from state
    # ------------------------------------------------------------------
    def _refresh(self) -> None:
        self._widget_dates.clear()
        title, day_names = locale_names.with_fallback(self._labels, self.state.locale)

        self.header.configure(text=title)
        week_start = self.state.week_start
        for col, (lbl, name) in enumerate(zip(self.day_headers, day_names)):
            is_weekend = (week_start + col) % 7 in (SUNDAY, SATURDAY)
            lbl.configure(text=name, fg="#CC0000" if is_weekend else "#333333")

        grid = self.state.current_grid()
        weeks = grid.week_numbers()
        for r in range(MAX_ROWS):
            if r < len(grid):
                self.week_nums[r].configure(text=str(weeks[r]))
                for c, day_cell in enumerate(grid.rows[r]):
                    lbl = self.day_cells[r][c]
                    bg, fg = self._day_colors(
                        self.state.is_today(day_cell),
                        self.state.is_selected(day_cell),
                        not day_cell.in_current_month,
                    )
                    clickable = (day_cell.in_current_month
                                 or self.state.allow_adjacent_selection)
                    lbl.configure(text=str(day_cell.day), bg=bg, fg=fg,
                                  cursor="hand2" if clickable else "",
                                  font=self.font_bold if self.state.is_today(day_cell)
                                  else self.font_normal)
                    if clickable:
                        self._widget_dates[id(lbl)] = day_cell.date
            else:
                self.week_nums[r].configure(text="")
                for lbl in self.day_cells[r]:
                    lbl.configure(text="", bg=GRID_BG, cursor="")

        self.footer.configure(text=self._footer_text())

    def _labels(self, locale: str) -> tuple[str, list[str]]:
        self.state.set_locale(locale)
        return self.state.title(), self.state.weekday_labels()

    @staticmethod
    def _day_colors(is_today: bool, is_selected: bool, other_month: bool) -> tuple[str, str]:
        if is_selected:
            return SEL_BG, "black"
        if is_today:
            return ACCENT, "white"
        if other_month:
            return GRID_BG, OTHER_FG
        return GRID_BG, "black"

    def _footer_text(self) -> str:
        sel = self.state.selected_date
        if sel is None:
            return f"Today: {self.state.today.strftime('%d.%m.%Y')}"
        return f"Selected: {sel.strftime('%d.%m.%Y')}"

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def _apply(self, transition, *args) -> None:
        transition(*args)
        self._refresh()

    def _on_click(self, event: tk.Event) -> None:
        d = self._widget_dates.get(id(event.widget))
        if d is None:
            return
        self.state.select(d)
        self._refresh()

    def _on_state_selection(self, selected: date | None) -> None:
        settings = load_settings(self._settings_path)
        settings["last_selected"] = selected.isoformat() if selected else None
        save_settings(settings, self._settings_path)

    def _on_escape(self, _event: tk.Event) -> None:
        if self.state.selected_date is not None:
            self._apply(self.state.clear_selection)
        else:
            self.hide()

    # ------------------------------------------------------------------
    # Settings dialog
    # ------------------------------------------------------------------
    def open_settings(self) -> None:
        dlg = tk.Toplevel(self.root)
        dlg.title("Settings")
        dlg.resizable(False, False)
        dlg.attributes("-topmost", True)
        dlg.grab_set()

        frame = tk.Frame(dlg, padx=12, pady=8)
        frame.pack()

        tk.Label(frame, text="Locale:", font=self.font_normal).grid(
            row=0, column=0, sticky="w", pady=4,
        )
        locale_var = tk.StringVar(value=self.state.locale)
        tk.Entry(frame, textvariable=locale_var, width=10, font=self.font_normal).grid(
            row=0, column=1, padx=(8, 0), pady=4,
        )

        tk.Label(frame, text="First weekday:", font=self.font_normal).grid(
            row=1, column=0, sticky="w", pady=4,
        )
        day_choices = ["Locale default"] + locale_names.weekday_names(0, "en")
        week_var = tk.StringVar(value=day_choices[0])
        if self.state.week_start_override is not None:
            week_var.set(day_choices[self.state.week_start_override + 1])
        tk.OptionMenu(frame, week_var, *day_choices).grid(
            row=1, column=1, padx=(8, 0), pady=4, sticky="we",
        )

        adjacent_var = tk.BooleanVar(value=self.state.allow_adjacent_selection)
        tk.Checkbutton(
            frame, text="Allow picking days of adjacent months", variable=adjacent_var,
            font=self.font_normal,
        ).grid(row=2, column=0, columnspan=2, sticky="w", pady=4)

        btn_frame = tk.Frame(frame)
        btn_frame.grid(row=3, column=0, columnspan=2, pady=(8, 0))

        def on_ok() -> None:
            loc = locale_var.get().strip() or locale_names.DEFAULT_LOCALE
            idx = day_choices.index(week_var.get())
            week_start = None if idx == 0 else idx - 1

            settings = load_settings(self._settings_path)
            settings["locale"] = loc
            settings["week_start"] = week_start
            settings["allow_adjacent_selection"] = adjacent_var.get()
            save_settings(settings, self._settings_path)

            self.state.set_locale(loc)
            self.state.set_week_start(week_start)
            self.state.allow_adjacent_selection = adjacent_var.get()
            dlg.destroy()
            self._refresh()

        tk.Button(btn_frame, text="OK", width=8, command=on_ok).pack(
            side="left", padx=4,
        )
        tk.Button(btn_frame, text="Cancel", width=8, command=dlg.destroy).pack(
            side="left", padx=4,
        )

    # ------------------------------------------------------------------
    # Show / Hide / Toggle
    # ------------------------------------------------------------------
    def toggle(self) -> None:
        if self.root.state() == "withdrawn" or not self.root.winfo_viewable():
            self.show()
        else:
            self.hide()

    def show(self) -> None:
        self.root.title(self._title())
        self._refresh()
        self.root.deiconify()
        self._position_window()
        self.root.lift()
        self.root.focus_force()

    def hide(self) -> None:
        settings = load_settings(self._settings_path)
        settings["window_x"] = self.root.winfo_x()
        settings["window_y"] = self.root.winfo_y()
        save_settings(settings, self._settings_path)
        self.root.withdraw()

    # ------------------------------------------------------------------
    # Position: saved place, else bottom-right of the screen
    # ------------------------------------------------------------------
    def _position_window(self) -> None:
        self.root.update_idletasks()
        settings = load_settings(self._settings_path)
        x, y = settings["window_x"], settings["window_y"]
        if x is None or y is None:
            x = self.root.winfo_screenwidth() - self.root.winfo_reqwidth() - 12
            y = self.root.winfo_screenheight() - self.root.winfo_reqheight() - 60
        self.root.geometry(f"+{x}+{y}")
