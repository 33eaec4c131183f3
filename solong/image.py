"""In-memory pixel images laid out as rows of packed pixels."""

from __future__ import annotations

_ROW_PAD_BITS = 32


class Image:
    """A width x height image with fixed bits per pixel and byte order.

    Rows are padded to a multiple of 32 bits; ``size_line`` is the number of
    bytes from one row to the next. Pixel data starts zeroed.
    """

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32,
                 big_endian: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(
                f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}"
            )
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = big_endian
        row_bits = width * bits_per_pixel
        self.size_line = -(-row_bits // _ROW_PAD_BITS) * (_ROW_PAD_BITS // 8)
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at (x, y) in the image's byte order."""
        opp = self.bytes_per_pixel
        start = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._byteorder)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row ``y``, padding included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.size_line
        return bytes(self.data[start:start + self.size_line])