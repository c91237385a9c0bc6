import unittest

from services.customization_service import (
    DUCK_COLORS,
    GLASSES_STYLES,
    SMILE_STYLES,
    default_customization,
    describe_customization,
)
from services.naming_service import generate_room_code, normalize_room_code


class TestCustomizationService(unittest.TestCase):

    def test_default_customization(self):
        self.assertEqual(default_customization(), {"color": "#FFD700", "glasses": 0, "smile": 0})

    def test_describe_customization(self):
        self.assertEqual(
            describe_customization("#ffa500", 1, 2),
            {"color": "#FFA500", "glasses": "round", "smile": "excited"}
        )

    def test_catalog_sizes(self):
        self.assertEqual(len(DUCK_COLORS), 6)
        self.assertEqual(len(GLASSES_STYLES), 4)
        self.assertEqual(len(SMILE_STYLES), 3)


class TestNamingService(unittest.TestCase):

    def test_room_code_shape(self):
        code = generate_room_code()
        self.assertEqual(len(code), 6)
        self.assertTrue(code.isalpha() and code.isupper())

    def test_normalize_room_code(self):
        self.assertEqual(normalize_room_code(" abCd "), "ABCD")


if __name__ == "__main__":
    unittest.main()
