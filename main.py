"""Entry point: pystray on a daemon thread, tkinter on the main thread."""

import logging
import threading
from datetime import date

from datepicker_state import DatepickerState
from datepicker_window import DatepickerWindow
from icon_gen import create_icon_image, tray_title
from settings import last_selected, load_settings
from tray_icon import create_tray

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    settings = load_settings()
    state = DatepickerState.from_settings(settings, date.today())
    win = DatepickerWindow(state)

    # Callbacks marshalled onto the tkinter main thread
    def on_show() -> None:
        win.root.after(0, win.toggle)

    def on_settings() -> None:
        win.root.after(0, win.open_settings)

    def on_today() -> None:
        def _pick() -> None:
            state.select(state.today)
            win.show()
        win.root.after(0, _pick)

    def on_exit() -> None:
        def _quit() -> None:
            tray.stop()
            win.root.destroy()
        win.root.after(0, _quit)

    tray = create_tray(create_icon_image(state.today), on_show, on_exit,
                       on_settings=on_settings, on_today=on_today)
    tray.title = tray_title(last_selected(settings))

    def on_selection(selected) -> None:
        logger.info("Selected date: %s", selected)
        tray.title = tray_title(selected)

    state.subscribe(on_selection)

    # Run pystray in a daemon thread so it doesn't block tkinter
    tray_thread = threading.Thread(target=tray.run, daemon=True)
    tray_thread.start()

    win.root.mainloop()


if __name__ == "__main__":
    main()
