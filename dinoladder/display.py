"""An in-memory model of a 128x160 colour LCD with simple drawing primitives."""

from .font import FONT_HEIGHT, FONT_WIDTH, glyph

SCREEN_WIDTH = 128
SCREEN_HEIGHT = 160
CHARACTER_GAP = 2


def rgb_to_word(r, g, b):
    """Pack 8-bit red, green and blue into the panel's 16-bit colour word."""
    value = (g >> 5) + ((g & 7) << 13) + ((r >> 3) << 8) + ((b >> 3) << 3)
    return value & 0xFFFF


def _line_low(x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    step = 1
    if dy < 0:
        step = -1
        dy = -dy
    decision = 2 * dy - dx
    y = y0
    for x in range(x0, x1 + 1):
        yield x, y
        if decision > 0:
            y += step
            decision -= 2 * dx
        decision += 2 * dy


def _line_high(x0, y0, x1, y1):
    dx = x1 - x0
    dy = y1 - y0
    step = 1
    if dx < 0:
        step = -1
        dx = -dx
    decision = 2 * dx - dy
    x = x0
    for y in range(y0, y1 + 1):
        yield x, y
        if decision > 0:
            x += step
            decision -= 2 * dy
        decision += 2 * dx


def _line_points(x0, y0, x1, y1):
    if abs(y1 - y0) < abs(x1 - x0):
        if x0 > x1:
            return _line_low(x1, y1, x0, y0)
        return _line_low(x0, y0, x1, y1)
    if y0 > y1:
        return _line_high(x1, y1, x0, y0)
    return _line_high(x0, y0, x1, y1)


def _circle_octant(radius):
    """Yield (x, y) offsets of the midpoint circle's first octant."""
    x = radius - 1
    y = 0
    dx = 1
    dy = 1
    err = dx - (radius << 1)
    while x >= y:
        yield x, y
        if err <= 0:
            y += 1
            err += dy
            dy += 2
        if err > 0:
            x -= 1
            dx += 2
            err += dx - (radius << 1)


class Display:
    """A framebuffer of 16-bit colour words; writes outside the screen are dropped."""

    def __init__(self, width=SCREEN_WIDTH, height=SCREEN_HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError("display dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [[0] * width for _ in range(height)]

    def _in_bounds(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def _plot(self, x, y, colour):
        if self._in_bounds(x, y):
            self._pixels[y][x] = colour & 0xFFFF

    def get_pixel(self, x, y):
        """Return the colour at (x, y); raise IndexError off screen."""
        if not self._in_bounds(x, y):
            raise IndexError(f"pixel ({x}, {y}) is off screen")
        return self._pixels[y][x]

    def clear(self):
        """Black out the whole screen."""
        self.fill_rectangle(0, 0, self.width, self.height, 0)

    def fill_rectangle(self, x, y, width, height, colour):
        if width < 0 or height < 0:
            raise ValueError("rectangle dimensions must not be negative")
        left = max(x, 0)
        right = min(x + width, self.width)
        if left >= right:
            return
        run = [colour & 0xFFFF] * (right - left)
        for row in self._pixels[max(y, 0):max(min(y + height, self.height), 0)]:
            row[left:right] = run

    def put_pixel(self, x, y, colour):
        self._plot(x, y, colour)

    def put_image(self, x, y, width, height, image, h_flip, v_flip):
        """Blit a row-major image, optionally mirrored horizontally and/or vertically."""
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        if len(image) < width * height:
            raise ValueError(
                f"image holds {len(image)} pixels, {width * height} needed"
            )
        for offset in range(height):
            source = height - 1 - offset if v_flip else offset
            line = list(image[source * width:(source + 1) * width])
            if h_flip:
                line.reverse()
            for column, colour in enumerate(line):
                self._plot(x + column, y + offset, colour)

    def draw_line(self, x0, y0, x1, y1, colour):
        for x, y in _line_points(x0, y0, x1, y1):
            self._plot(x, y, colour)

    def draw_rectangle(self, x, y, w, h, colour):
        self.draw_line(x, y, x + w, y, colour)
        self.draw_line(x, y, x, y + h, colour)
        self.draw_line(x + w, y, x + w, y + h, colour)
        self.draw_line(x, y + h, x + w, y + h, colour)

    def _circle_fits(self, x0, y0, radius):
        return (
            radius >= 1
            and radius <= x0
            and radius <= y0
            and x0 + radius <= self.width
            and y0 + radius <= self.height
        )

    def draw_circle(self, x0, y0, radius, colour):
        """Outline a circle; circles that would reach off screen are not drawn."""
        if not self._circle_fits(x0, y0, radius):
            return
        for x, y in _circle_octant(radius):
            for px, py in (
                (x0 + x, y0 + y), (x0 + y, y0 + x),
                (x0 - y, y0 + x), (x0 - x, y0 + y),
                (x0 - x, y0 - y), (x0 - y, y0 - x),
                (x0 + y, y0 - x), (x0 + x, y0 - y),
            ):
                self._plot(px, py, colour)

    def fill_circle(self, x0, y0, radius, colour):
        """Fill a circle; circles that would reach off screen are not drawn."""
        if not self._circle_fits(x0, y0, radius):
            return
        for x, y in _circle_octant(radius):
            self.draw_line(x0 - x, y0 + y, x0 + x, y0 + y, colour)
            self.draw_line(x0 - y, y0 + x, x0 + y, y0 + x, colour)
            self.draw_line(x0 - x, y0 - y, x0 + x, y0 - y, colour)
            self.draw_line(x0 - y, y0 - x, x0 + y, y0 - x, colour)

    @staticmethod
    def _character_image(char, fore, back, scale):
        columns = glyph(char)
        image = []
        for row in range(FONT_HEIGHT):
            line = []
            for bits in columns:
                line.extend([fore if bits >> row & 1 else back] * scale)
            for _ in range(scale):
                image.extend(line)
        return image

    def _print(self, text, x, y, fore, back, scale):
        images = [self._character_image(c, fore, back, scale) for c in text]
        width = FONT_WIDTH * scale
        height = FONT_HEIGHT * scale
        for image in images:
            self.put_image(x, y, width, height, image, False, False)
            x += width + CHARACTER_GAP

    def print_text(self, text, x, y, fore, back):
        self._print(text, x, y, fore, back, 1)

    def print_text_x2(self, text, x, y, fore, back):
        self._print(text, x, y, fore, back, 2)

    @staticmethod
    def _digits(number):
        if not 0 <= number <= 0xFFFF:
            raise ValueError(f"number {number} is outside 0..65535")
        return f"{number:05d}"

    def print_number(self, number, x, y, fore, back):
        """Print a 16-bit number as five zero-padded digits."""
        self.print_text(self._digits(number), x, y, fore, back)

    def print_number_x2(self, number, x, y, fore, back):
        """Print a 16-bit number as five zero-padded digits at double size."""
        self.print_text_x2(self._digits(number), x, y, fore, back)