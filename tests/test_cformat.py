"""Tests for img2header.core.cformat — literal formatting and row wrapping."""

from img2header.core.cformat import (
    array_body,
    guarded_header,
    hex32,
    hex_index,
    index_type,
    rgba_call,
    size_expr,
)


class TestLiterals:
    def test_hex32_zero_padded_upper(self):
        assert hex32((10, 20, 30, 40)) == '0x0A141E28'

    def test_hex32_black_transparent(self):
        assert hex32((0, 0, 0, 0)) == '0x00000000'

    def test_hex_index(self):
        assert hex_index(1) == '0x01'
        assert hex_index(255) == '0xFF'
        assert hex_index(299, 4) == '0x012B'

    def test_rgba_call(self):
        assert rgba_call('RGBA', (255, 0, 7, 128)) == 'RGBA(255, 0, 7, 128)'

    def test_size_expr_is_not_precomputed(self):
        assert size_expr(16, 8) == '16 * 8'


class TestIndexType:
    def test_byte_up_to_256(self):
        assert index_type(1) == ('uint8_t', 2)
        assert index_type(256) == ('uint8_t', 2)

    def test_wider_above_256(self):
        assert index_type(257) == ('uint16_t', 4)


class TestArrayBody:
    def test_empty(self):
        assert array_body([], 4) == '{}'

    def test_one_row(self):
        assert array_body(['a', 'b'], 2) == '{\n    a, b\n}'

    def test_wraps_at_stride(self):
        assert array_body(['a', 'b', 'c', 'd', 'e', 'f'], 3) == '{\n    a, b, c,\n    d, e, f\n}'

    def test_partial_last_row(self):
        assert array_body(['a', 'b', 'c'], 2) == '{\n    a, b,\n    c\n}'


class TestGuardedHeader:
    def test_layout(self):
        text = guarded_header('X_H', ['<stdint.h>'], ['int x;'])
        assert text == '#ifndef X_H\n#define X_H\n\n#include <stdint.h>\n\nint x;\n\n#endif // X_H\n'
