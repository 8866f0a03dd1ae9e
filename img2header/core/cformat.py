"""C literal formatting shared by the dialects.

Rows of literals wrap every `stride` values (the image width), so one
emitted line of pixel data is one image row.
"""

from collections.abc import Sequence

from img2header.core.palette import pack_rgba
from img2header.core.types import RGBA

INDENT = '    '


def hex32(color: RGBA) -> str:
    """Packed 0xRRGGBBAA literal, 8 upper-case hex digits."""
    return f'0x{pack_rgba(color):08X}'


def hex_index(index: int, digits: int = 2) -> str:
    return f'0x{index:0{digits}X}'


def rgba_call(macro: str, color: RGBA) -> str:
    """`MACRO(r, g, b, a)` with decimal channel arguments."""
    r, g, b, a = color
    return f'{macro}({r}, {g}, {b}, {a})'


def index_type(palette_size: int) -> tuple[str, int]:
    """(C integer type, hex digits) wide enough to address the palette."""
    if palette_size <= 0x100:
        return 'uint8_t', 2
    return 'uint16_t', 4


def array_body(literals: Sequence[str], stride: int) -> str:
    """Brace-enclosed initializer, `stride` literals per line.

    Empty input gives '{}'.
    """
    if not literals:
        return '{}'
    if stride < 1:
        stride = len(literals)
    rows = [', '.join(literals[i : i + stride]) for i in range(0, len(literals), stride)]
    return '{\n' + INDENT + (',\n' + INDENT).join(rows) + '\n}'


def size_expr(width: int, height: int) -> str:
    """Array size as the literal expression 'W * H'."""
    return f'{width} * {height}'


def guarded_header(guard: str, includes: Sequence[str], body: Sequence[str]) -> str:
    """Wrap body lines in an #ifndef/#define/#endif guard, newline-terminated."""
    lines = [f'#ifndef {guard}', f'#define {guard}', '']
    if includes:
        lines.extend(f'#include {inc}' for inc in includes)
        lines.append('')
    lines.extend(body)
    lines.extend(['', f'#endif // {guard}'])
    return '\n'.join(lines) + '\n'
