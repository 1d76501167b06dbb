"""Entry point — glues pystray (daemon thread) with tkinter (main thread)."""

import ctypes
import logging
import threading

from calendar_state import CalendarState
from calendar_window import CalendarWindow
from icon_gen import create_icon_image
from settings import load_settings
from tray_icon import create_tray, refresh_tray

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # DPI awareness so positions / fonts are crisp on Hi-DPI monitors
    try:
        ctypes.windll.shcore.SetProcessDpiAwareness(1)
    except (AttributeError, OSError):
        logger.debug("DPI awareness not available on this platform")

    settings = load_settings()
    state = CalendarState()
    cal_win = CalendarWindow(state, settings, close_to_tray=settings["show_tray"])

    if settings["show_tray"]:
        # Callbacks marshalled onto the tkinter main thread, the only writer of state
        def on_show() -> None:
            cal_win.root.after(0, cal_win.toggle)

        def on_today() -> None:
            cal_win.root.after(0, state.reset_to_today)

        def on_exit() -> None:
            def _quit() -> None:
                tray.stop()
                cal_win.close()
            cal_win.root.after(0, _quit)

        tray = create_tray(create_icon_image(), on_show, on_exit,
                           on_today=on_today, locale=settings["locale"])
        # Keep the day number current after midnight
        state.subscribe(lambda s: refresh_tray(tray, s.today(), settings["locale"]))

        # Run pystray in a daemon thread so it doesn't block tkinter
        tray_thread = threading.Thread(target=tray.run, daemon=True)
        tray_thread.start()

    logger.info("Mini Calendar started (%s)", state)
    cal_win.show()
    cal_win.root.mainloop()


if __name__ == "__main__":
    main()
