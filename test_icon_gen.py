from datetime import date

from icon_gen import create_icon_image, create_today_button_image


def test_tray_icon_draws_day_number():
    img = create_icon_image(date(2025, 1, 28))
    assert img.size == (64, 64)
    assert img.mode == "RGBA"
    darkest, _ = img.convert("L").getextrema()
    assert darkest < 128


def test_today_button_is_a_capsule():
    img = create_today_button_image(100, 50)
    assert img.size == (100, 50)
    # Rounded corners stay transparent, the body is filled with the accent colour
    assert img.getpixel((0, 0))[3] == 0
    assert img.getpixel((8, 25)) == (0x00, 0x78, 0xD4, 255)


def test_today_button_custom_colour():
    img = create_today_button_image(80, 40, color="#FF0000")
    assert img.getpixel((6, 20)) == (255, 0, 0, 255)
