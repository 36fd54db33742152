import unittest
from pbmtool.ops import op_flip_h, op_flip_v, op_invert


T, F = True, False


class TestOps(unittest.TestCase):
    def setUp(self):
        # 3x2 bits
        self.bits = [
            [F, T, F],
            [T, T, F],
        ]

    def test_invert(self):
        op_invert(self.bits)
        self.assertEqual(self.bits, [[T, F, T], [F, F, T]])

    def test_flip_h(self):
        op_flip_h(self.bits)
        self.assertEqual(self.bits, [
            [F, T, F][::-1],
            [T, T, F][::-1],
        ])

    def test_flip_h_even_width(self):
        bits = [[T, F, F, F]]
        op_flip_h(bits)
        self.assertEqual(bits, [[F, F, F, T]])

    def test_flip_v(self):
        first, second = self.bits
        op_flip_v(self.bits)
        self.assertEqual(self.bits, [[T, T, F], [F, T, F]])
        # rows are moved, not copied
        self.assertIs(self.bits[0], second)
        self.assertIs(self.bits[1], first)

    def test_flip_v_odd_height_keeps_middle(self):
        bits = [[T], [F], [F]]
        op_flip_v(bits)
        self.assertEqual(bits, [[F], [F], [T]])

    def test_single_pixel_noop(self):
        bits = [[T]]
        op_flip_h(bits)
        op_flip_v(bits)
        self.assertEqual(bits, [[T]])

    def test_empty_grid(self):
        bits = []
        op_invert(bits)
        op_flip_h(bits)
        op_flip_v(bits)
        self.assertEqual(bits, [])
