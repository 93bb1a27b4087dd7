import unittest

from ufrac import U64_MAX, gcd, lcm, lcm_by_scan


class GcdTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(gcd(120, 40), 40)
        self.assertEqual(gcd(17, 21), 1)
        self.assertEqual(gcd(48, 18), 6)

    def test_zero_arguments(self):
        self.assertEqual(gcd(7, 0), 7)
        self.assertEqual(gcd(0, 9), 9)
        self.assertEqual(gcd(0, 0), 0)

    def test_symmetric_and_divides_both(self):
        pairs = [(12, 18), (1, 1), (100, 75), (2**40, 2**20 * 3), (U64_MAX, 3)]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                d = gcd(a, b)
                self.assertEqual(d, gcd(b, a))
                self.assertEqual(a % d, 0)
                self.assertEqual(b % d, 0)

    def test_rejects_invalid_inputs(self):
        with self.assertRaises(TypeError):
            gcd(1.5, 2)
        with self.assertRaises(TypeError):
            gcd(True, 2)
        with self.assertRaises(ValueError):
            gcd(-4, 2)
        with self.assertRaises(OverflowError):
            gcd(U64_MAX + 1, 2)


class LcmTests(unittest.TestCase):
    def test_known_values(self):
        self.assertEqual(lcm(8, 5), 40)
        self.assertEqual(lcm(2, 4), 4)
        self.assertEqual(lcm(6, 6), 6)
        self.assertEqual(lcm(17, 21), 17 * 21)

    def test_zero_policy(self):
        self.assertEqual(lcm(5, 0), 0)
        self.assertEqual(lcm(0, 5), 0)
        self.assertEqual(lcm(0, 0), 0)

    def test_multiple_of_both(self):
        for a, b in [(4, 6), (9, 12), (1, 13), (35, 14)]:
            with self.subTest(a=a, b=b):
                m = lcm(a, b)
                self.assertEqual(m % a, 0)
                self.assertEqual(m % b, 0)

    def test_large_values_do_not_overflow(self):
        self.assertEqual(lcm(2**63, 2**62), 2**63)

    def test_result_beyond_64_bits_rejected(self):
        with self.assertRaises(OverflowError):
            lcm(U64_MAX, U64_MAX - 1)
        with self.assertRaises(OverflowError):
            lcm_by_scan(2**63, 3)
        self.assertEqual(lcm_by_scan(2**63, 2), 2**63)

    def test_scan_matches_closed_form(self):
        for a in range(0, 25):
            for b in range(0, 25):
                with self.subTest(a=a, b=b):
                    self.assertEqual(lcm_by_scan(a, b), lcm(a, b))

    def test_scan_special_cases(self):
        self.assertEqual(lcm_by_scan(8, 5), 40)
        self.assertEqual(lcm_by_scan(2, 4), 4)
        self.assertEqual(lcm_by_scan(17, 21), 17 * 21)
        self.assertEqual(lcm_by_scan(2**50, 2**50), 2**50)


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
