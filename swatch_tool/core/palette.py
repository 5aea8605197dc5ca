"""Colour value helpers: packing, unpacking, hex and RGB string forms.

Packed colours are 32-bit ints laid out as 0xAARRGGBB. Opaque sources carry
alpha 0xFF, so an opaque pure red is 0xFFFF0000.
"""

RGB_MASK = 0x00FFFFFF
OPAQUE = 0xFF


def pack(r: int, g: int, b: int, a: int = OPAQUE) -> int:
    """Pack channels into a 0xAARRGGBB int."""
    for channel in (r, g, b, a):
        if not 0 <= channel <= 255:
            raise ValueError(f'Channel out of range 0-255: {channel}')
    return (a << 24) | (r << 16) | (g << 8) | b


def unpack(value: int) -> tuple[int, int, int, int]:
    """Split a packed 0xAARRGGBB int into (r, g, b, a)."""
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, (value >> 24) & 0xFF


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02X}{g:02X}{b:02X}'


def rgb_string(r: int, g: int, b: int) -> str:
    return f'RGB({r}, {g}, {b})'


def luminance(r: int, g: int, b: int) -> float:
    """Perceived brightness 0-255 (ITU-R BT.601 weights), used to pick label ink."""
    return 0.299 * r + 0.587 * g + 0.114 * b
