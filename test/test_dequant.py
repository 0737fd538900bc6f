import unittest

from qoa import (
    DEQUANT_TABLE,
    dequant_residual,
    dequant_scale_factor,
    residual_contribution,
    round_half_away,
)


class TestDequant(unittest.TestCase):
    # Residual contribution for every scale factor index (rows) and residual
    # index (columns)
    RESIDUALS: list[list[int]] = [
        [1, -1, 3, -3, 5, -5, 7, -7],
        [5, -5, 18, -18, 32, -32, 49, -49],
        [16, -16, 53, -53, 95, -95, 147, -147],
        [34, -34, 113, -113, 203, -203, 315, -315],
        [63, -63, 210, -210, 378, -378, 588, -588],
        [104, -104, 345, -345, 621, -621, 966, -966],
        [158, -158, 528, -528, 950, -950, 1477, -1477],
        [228, -228, 760, -760, 1368, -1368, 2128, -2128],
        [316, -316, 1053, -1053, 1895, -1895, 2947, -2947],
        [422, -422, 1405, -1405, 2529, -2529, 3934, -3934],
        [548, -548, 1828, -1828, 3290, -3290, 5117, -5117],
        [696, -696, 2320, -2320, 4176, -4176, 6496, -6496],
        [868, -868, 2893, -2893, 5207, -5207, 8099, -8099],
        [1064, -1064, 3548, -3548, 6386, -6386, 9933, -9933],
        [1286, -1286, 4288, -4288, 7718, -7718, 12005, -12005],
        [1536, -1536, 5120, -5120, 9216, -9216, 14336, -14336],
    ]

    def test_round_half_away(self):
        self.assertEqual(3, round_half_away(2.5))
        self.assertEqual(-3, round_half_away(-2.5))
        self.assertEqual(1, round_half_away(0.5))
        self.assertEqual(-1, round_half_away(-0.5))
        self.assertEqual(2, round_half_away(2.4))
        self.assertEqual(-2, round_half_away(-2.4))
        self.assertEqual(0, round_half_away(0.0))

    def test_dequant_scale_factor(self):
        self.assertEqual(1, dequant_scale_factor(0))
        self.assertEqual(7, dequant_scale_factor(1))
        self.assertEqual(21, dequant_scale_factor(2))
        self.assertEqual(2048, dequant_scale_factor(15))

    def test_dequant_residual(self):
        self.assertEqual(0.75, dequant_residual(0))
        self.assertEqual(-7.0, dequant_residual(7))
        self.assertEqual(8, len(DEQUANT_TABLE))

    def test_residual_contribution(self):
        # 1 * -2.5 is a tie
        self.assertEqual(-3, residual_contribution(0, 3))
        self.assertEqual(3, residual_contribution(0, 2))
        for sf_index, row in enumerate(TestDequant.RESIDUALS):
            for r_index, expected in enumerate(row):
                with self.subTest(sf_index=sf_index, r_index=r_index):
                    self.assertEqual(expected, residual_contribution(sf_index, r_index))


if __name__ == "__main__":
    unittest.main()
