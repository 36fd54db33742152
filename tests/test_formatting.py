import unittest
from pbmtool.formatting import format_header, format_pbm, format_row


class TestFormatting(unittest.TestCase):
    def test_row_keeps_trailing_space(self):
        self.assertEqual(format_row([True, False, True]), "1 0 1 ")

    def test_header(self):
        self.assertEqual(format_header("P1", 3, 2), "P1\n3 2\n")

    def test_pbm(self):
        out = format_pbm("P1", 2, 2, [[True, True], [False, True]])
        self.assertEqual(out, "P1\n2 2\n1 1 \n0 1 \n")
