import unittest
from taiwan_id.checksum import check_digit, check_id, explain, is_valid
from taiwan_id.errors import InvalidLetter

class TestIsValid(unittest.TestCase):
    def test_regression_fixtures(self):
        self.assertTrue(is_valid("A123456789"))
        self.assertFalse(is_valid("A987654321"))
        self.assertFalse(is_valid("Z123456789"))

    def test_all_zero_body(self):
        # 1*1 + 0*9 + 1*8 = 9, so only check digit 1 closes the sum
        self.assertFalse(is_valid("A100000000"))
        self.assertTrue(is_valid("A100000001"))

    def test_lengths(self):
        self.assertFalse(is_valid(""))
        self.assertFalse(is_valid("A12345678"))
        self.assertFalse(is_valid("A1234567899"))

    def test_malformed_strings(self):
        self.assertFalse(is_valid("a123456789"))
        self.assertFalse(is_valid(" A12345678"))
        self.assertFalse(is_valid("A123456789 "))
        self.assertFalse(is_valid("A12345678X"))
        self.assertFalse(is_valid("A一二三四五六七八九"))
        self.assertFalse(is_valid("A１２３４５６７８９"))
        self.assertFalse(is_valid("A12345678\n"))

    def test_never_raises_on_non_strings(self):
        for bad in (None, 123456789, b"A123456789", ["A123456789"]):
            self.assertFalse(is_valid(bad))

    def test_deterministic(self):
        for s in ("A123456789", "A987654321", "", "a123456789"):
            self.assertEqual(is_valid(s), is_valid(s))

    def test_gender_digit_not_restricted(self):
        # 1 + 0 + 0*8 = 1 -> check 9
        self.assertTrue(is_valid("A000000009"))
        # 1 + 0 + 9*8 = 73 -> check 7
        self.assertTrue(is_valid("A900000007"))

    def test_single_digit_substitution(self):
        # a change goes unnoticed when weight * delta is a multiple of 10
        valid = "A123456789"
        weights = [8, 7, 6, 5, 4, 3, 2, 1, 1]
        for pos in range(1, 10):
            w = weights[pos - 1]
            orig = int(valid[pos])
            for d in range(10):
                if d == orig:
                    continue
                mutated = valid[:pos] + str(d) + valid[pos + 1:]
                undetected = (w * (d - orig)) % 10 == 0
                self.assertEqual(is_valid(mutated), undetected, mutated)

class TestCheckId(unittest.TestCase):
    def test_valid(self):
        r = check_id("A123456789")
        self.assertTrue(r.valid)
        self.assertIsNone(r.reason)
        self.assertEqual(r.expected_check_digit, 9)
        self.assertEqual(r.total, 130)

    def test_checksum_fail_reports_expected_digit(self):
        r = check_id("A123456780")
        self.assertFalse(r.valid)
        self.assertEqual(r.reason, "checksum_fail")
        self.assertEqual(r.expected_check_digit, 9)
        self.assertEqual(r.total, 121)

    def test_reasons(self):
        self.assertEqual(check_id("a123456789").reason, "invalid_letter")
        self.assertEqual(check_id("1234567890").reason, "invalid_letter")
        self.assertEqual(check_id("A12345678X").reason, "format_mismatch")
        self.assertEqual(check_id("A1234").reason, "format_mismatch")
        self.assertEqual(check_id(None).reason, "format_mismatch")

class TestCheckDigit(unittest.TestCase):
    def test_closed_form(self):
        self.assertEqual(check_digit("A12345678"), 9)
        self.assertEqual(check_digit("A10000000"), 1)
        self.assertEqual(check_digit("Z20000000"), 4)

    def test_every_letter_closes_the_sum(self):
        for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ":
            partial = letter + "23456789"
            self.assertTrue(is_valid(partial + str(check_digit(partial))), partial)

    def test_malformed_partials(self):
        with self.assertRaises(InvalidLetter):
            check_digit("a12345678")
        for bad in ("", "A1234567", "A123456789", "A1234567X"):
            with self.assertRaises(ValueError):
                check_digit(bad)

class TestExplain(unittest.TestCase):
    def test_breakdown(self):
        e = explain("A123456789")
        self.assertEqual(e["digits"], [1, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9])
        self.assertEqual(e["weights"], [1, 9, 8, 7, 6, 5, 4, 3, 2, 1, 1])
        self.assertEqual(e["products"], [1, 0, 8, 14, 18, 20, 20, 18, 14, 8, 9])
        self.assertEqual(e["total"], 130)
        self.assertTrue(e["valid"])

    def test_rejects_malformed(self):
        with self.assertRaises(ValueError):
            explain("a123456789")

if __name__ == "__main__":
    unittest.main()
