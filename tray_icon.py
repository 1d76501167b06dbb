"""System-tray icon setup via pystray."""

from datetime import date
from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from calendar_logic import long_date_display
from icon_gen import create_icon_image


def tray_title(today: date, locale: str | None = None) -> str:
    return f"Mini Calendar – {long_date_display(today, locale)}"


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_exit: Callable[[], None],
    on_today: Callable[[], None] | None = None,
    locale: str | None = None,
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    items: list[MenuItem | Menu] = [
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
    ]
    if on_today is not None:
        items.append(MenuItem("Today", lambda _icon, _item: on_today()))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    menu = Menu(*items)
    return pystray.Icon("mini-calendar", icon_image, tray_title(date.today(), locale), menu)


def refresh_tray(icon: pystray.Icon, today: date, locale: str | None = None) -> bool:
    """Redraw icon and tooltip if the day changed; returns True when it did."""
    title = tray_title(today, locale)
    if icon.title == title:
        return False
    icon.icon = create_icon_image(today)
    icon.title = title
    return True
