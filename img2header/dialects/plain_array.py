"""Flat C arrays and width/height constants, no struct.

Indexed images emit a uint32_t palette of packed 0xRRGGBBAA words and a
uint8_t array of palette indices. Direct images emit a single uint32_t
array of packed pixels. Width and height are separate uint16_t constants.

Output file: <name>.h

Example:
    img2header plain-array sprite.png -c 16
    img2header plain-array sprite.png --direct --stdout

    const uint32_t sprite_palette[2] = {
        0xFF0000FF, 0x00FF00FF
    };
    const uint8_t sprite_data[2 * 1] = {
        0x00, 0x01
    };
    const uint16_t sprite_width = 2;
    const uint16_t sprite_height = 1;
"""

from img2header.core.cformat import array_body, guarded_header, hex32, hex_index, index_type, size_expr
from img2header.core.identifiers import header_guard
from img2header.core.types import Dialect, QuantizedImage

dialect = Dialect(
    name='plain-array',
    help='Flat C arrays (palette + indices, or packed RGBA) with width/height constants.',
    suffix='.h',
)


@dialect.render
def render(image: QuantizedImage, basis: str) -> str:
    w, h = image.width, image.height
    body = []
    if image.indexed:
        ctype, digits = index_type(len(image.palette))
        palette = array_body([hex32(c) for c in image.palette], w)
        data = array_body([hex_index(i, digits) for i in image.indices], w)
        body.append(f'const uint32_t {basis}_palette[{len(image.palette)}] = {palette};')
        body.append(f'const {ctype} {basis}_data[{size_expr(w, h)}] = {data};')
    else:
        data = array_body([hex32(c) for c in image.pixels], w)
        body.append(f'const uint32_t {basis}_data[{size_expr(w, h)}] = {data};')
    body.append(f'const uint16_t {basis}_width = {w};')
    body.append(f'const uint16_t {basis}_height = {h};')
    return guarded_header(header_guard(basis), ['<stdint.h>'], body)
