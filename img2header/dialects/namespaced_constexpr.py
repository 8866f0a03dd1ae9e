"""C++20 asset in its own namespace, built from constexpr std::array and std::span.

Palette entries go through the IMG2HEADER_RGBA(r, g, b, a) macro with
decimal channels instead of packed hex literals. Direct-mode pixels stay
packed 0xRRGGBBAA literals. The macro is guarded so several generated
headers can be included in one translation unit.

Output file: <name>_img.hpp

Example:
    img2header namespaced-constexpr sprite.png -c 8

    namespace sprite {
    inline constexpr std::uint16_t width = 2;
    ...
    inline constexpr std::array<std::uint32_t, 2> palette = {
        IMG2HEADER_RGBA(255, 0, 0, 255), IMG2HEADER_RGBA(0, 255, 0, 255)
    };
    ...
    inline constexpr Image image{palette, data, width, height};
    }  // namespace sprite
"""

from img2header.core.cformat import (
    INDENT,
    array_body,
    guarded_header,
    hex32,
    hex_index,
    index_type,
    rgba_call,
    size_expr,
)
from img2header.core.identifiers import header_guard
from img2header.core.types import Dialect, QuantizedImage

RGBA_MACRO = 'IMG2HEADER_RGBA'

_MACRO_DEFINITION = [
    f'#ifndef {RGBA_MACRO}',
    f'#define {RGBA_MACRO}(r, g, b, a) \\',
    '    ((static_cast<std::uint32_t>(r) & 0xFFu) << 24 | (static_cast<std::uint32_t>(g) & 0xFFu) << 16 | \\',
    '     (static_cast<std::uint32_t>(b) & 0xFFu) << 8 | (static_cast<std::uint32_t>(a) & 0xFFu))',
    '#endif',
]

dialect = Dialect(
    name='namespaced-constexpr',
    help='C++20 namespace with constexpr std::array storage and std::span views.',
    suffix='_img.hpp',
)


@dialect.render
def render(image: QuantizedImage, basis: str) -> str:
    w, h = image.width, image.height

    if image.indexed:
        ctype, digits = index_type(len(image.palette))
        data_type = f'std::{ctype}'
        data_literals = [hex_index(i, digits) for i in image.indices]
    else:
        data_type = 'std::uint32_t'
        data_literals = [hex32(c) for c in image.pixels]

    body = list(_MACRO_DEFINITION)
    body += [
        '',
        f'namespace {basis} {{',
        '',
        f'inline constexpr std::uint16_t width = {w};',
        f'inline constexpr std::uint16_t height = {h};',
        '',
    ]
    if image.indexed:
        palette = array_body([rgba_call(RGBA_MACRO, c) for c in image.palette], w)
        body += [f'inline constexpr std::array<std::uint32_t, {len(image.palette)}> palette = {palette};', '']
    data = array_body(data_literals, w)
    body += [f'inline constexpr std::array<{data_type}, {size_expr(w, h)}> data = {data};', '', 'struct Image {']
    if image.indexed:
        body.append(f'{INDENT}std::span<const std::uint32_t> palette;')
    body += [
        f'{INDENT}std::span<const {data_type}> data;',
        f'{INDENT}std::uint16_t width;',
        f'{INDENT}std::uint16_t height;',
        '};',
        '',
    ]
    members = 'palette, data, width, height' if image.indexed else 'data, width, height'
    body += [f'inline constexpr Image image{{{members}}};', '', f'}}  // namespace {basis}']
    return guarded_header(header_guard(basis), ['<array>', '<cstdint>', '<span>'], body)
