"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from datetime import date

from PIL import Image, ImageDraw, ImageFont

ICON_SIZE = 64
_HEADER_COLOR = "#0078D4"


def _fit_font(draw: ImageDraw.ImageDraw, text: str, max_w: int, max_h: int):
    """Return the largest TrueType font that fits, or PIL's default font."""
    font_size = 120
    while font_size > 10:
        try:
            font = ImageFont.truetype("DejaVuSans-Bold.ttf", font_size)
        except OSError:
            return ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        if bbox[2] - bbox[0] <= max_w and bbox[3] - bbox[1] <= max_h:
            return font
        font_size -= 1
    return ImageFont.load_default()


def create_icon_image(day: date | None = None) -> Image.Image:
    """Return a 64×64 RGBA tear-off calendar sheet showing the day of month."""
    size = ICON_SIZE
    img = Image.new("RGBA", (size, size), "white")
    draw = ImageDraw.Draw(img)

    text = str((day or date.today()).day)
    header_h = size // 5
    draw.rectangle((0, 0, size - 1, header_h), fill=_HEADER_COLOR)
    draw.rectangle((0, 0, size - 1, size - 1), outline=_HEADER_COLOR)

    body_h = size - header_h - 2
    font = _fit_font(draw, text, size - 4, body_h - 4)

    # Centre the visible pixels in the body (compensate for font metric offsets)
    bbox = draw.textbbox((0, 0), text, font=font)
    x = (size - (bbox[2] - bbox[0])) / 2 - bbox[0]
    y = header_h + 1 + (body_h - (bbox[3] - bbox[1])) / 2 - bbox[1]
    draw.text((x, y), text, fill="black", font=font)

    return img


def tray_title(selected: date | None) -> str:
    """Tray tooltip: app name plus the most recent pick, if any."""
    if selected is None:
        return "Mini Datepicker"
    return f"Mini Datepicker – {selected.isoformat()}"
