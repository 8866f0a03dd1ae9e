"""C struct wrapping the palette, pixel data and dimensions.

Emits WIDTH/HEIGHT macros, a per-asset `<name>_image_t` typedef (palette
pointer when indexed, data pointer, width, height), the static backing
arrays, and one `<name>_image` instance initialized from them.

Output file: <name>_img.h

Example:
    img2header struct-wrapped sprite.png -c 4

    typedef struct {
        const uint32_t *palette;
        const uint8_t *data;
        uint16_t width;
        uint16_t height;
    } sprite_image_t;
    ...
    static const sprite_image_t sprite_image = {
        sprite_palette,
        sprite_data,
        SPRITE_WIDTH,
        SPRITE_HEIGHT
    };
"""

from img2header.core.cformat import INDENT, array_body, guarded_header, hex32, hex_index, index_type, size_expr
from img2header.core.identifiers import header_guard
from img2header.core.types import Dialect, QuantizedImage

dialect = Dialect(
    name='struct-wrapped',
    help='C typedef struct (palette/data pointers, width, height) plus backing arrays.',
    suffix='_img.h',
)


@dialect.render
def render(image: QuantizedImage, basis: str) -> str:
    w, h = image.width, image.height
    width_macro = f'{basis.upper()}_WIDTH'
    height_macro = f'{basis.upper()}_HEIGHT'
    type_name = f'{basis}_image_t'

    if image.indexed:
        data_type, digits = index_type(len(image.palette))
        data_literals = [hex_index(i, digits) for i in image.indices]
    else:
        data_type = 'uint32_t'
        data_literals = [hex32(c) for c in image.pixels]

    body = [f'#define {width_macro} {w}', f'#define {height_macro} {h}', '', 'typedef struct {']
    if image.indexed:
        body.append(f'{INDENT}const uint32_t *palette;')
    body += [
        f'{INDENT}const {data_type} *data;',
        f'{INDENT}uint16_t width;',
        f'{INDENT}uint16_t height;',
        f'}} {type_name};',
        '',
    ]

    members = []
    if image.indexed:
        palette = array_body([hex32(c) for c in image.palette], w)
        body += [f'static const uint32_t {basis}_palette[{len(image.palette)}] = {palette};', '']
        members.append(f'{basis}_palette')
    data = array_body(data_literals, w)
    body += [f'static const {data_type} {basis}_data[{size_expr(w, h)}] = {data};', '']
    members += [f'{basis}_data', width_macro, height_macro]

    body.append(f'static const {type_name} {basis}_image = {{')
    body.append(',\n'.join(INDENT + m for m in members))
    body.append('};')
    return guarded_header(header_guard(basis), ['<stdint.h>'], body)
