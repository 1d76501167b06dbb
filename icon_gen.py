"""Generate the in-memory images (tray icon, "today" button) with PIL."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ACCENT = "#0078D4"

_FONT_CANDIDATES = ("segoeuib.ttf", "DejaVuSans-Bold.ttf")


def _load_font(size: int) -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    for name in _FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size)


def create_icon_image(today: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA image: black day-of-month on white, filling full height."""
    size = 64
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    text = str((today or date.today()).day)

    # Find the largest font size that fits the icon
    font_size = 120
    font = _load_font(font_size)
    while font_size > 10:
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= size and bbox[3] - bbox[1] <= size:
            break
        font_size -= 1
        font = _load_font(font_size)

    # Centre the actual visible pixels (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = (size - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img


def create_today_button_image(width: int = 100, height: int = 50,
                              color: str = ACCENT) -> Image.Image:
    """Return a transparent image with a magnifying glass on a filled capsule."""
    img = Image.new("RGBA", (width, height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rounded_rectangle((0, 0, width - 1, height - 1), radius=height // 2, fill=color)

    # Lens + handle, centred
    r = height // 5
    cx, cy = width // 2 - r // 3, height // 2 - r // 3
    line_w = max(2, height // 16)
    draw.ellipse((cx - r, cy - r, cx + r, cy + r), outline="white", width=line_w)
    draw.line((cx + r * 0.7, cy + r * 0.7, cx + r * 1.7, cy + r * 1.7),
              fill="white", width=line_w + 1)
    return img
