import unittest

from TM1model.Utils.Utils import CaseAndSpaceInsensitiveDict


class TestCaseAndSpaceInsensitiveDict(unittest.TestCase):

    def setUp(self):
        self.map = CaseAndSpaceInsensitiveDict()
        self.map["key1"] = "value1"
        self.map["key2"] = "value2"
        self.map["key3"] = "value3"

    def tearDown(self):
        del self.map

    def test_get_item(self):
        self.assertEqual(self.map["KEY1"], "value1")
        self.assertEqual(self.map["key2"], "value2")
        self.assertEqual(self.map["K e Y 3"], "value3")

    def test_set_item_overwrites_existing_key(self):
        self.map["K EY 1"] = "new_value1"
        self.assertEqual(len(self.map), 3)
        self.assertEqual(self.map["key1"], "new_value1")

    def test_delete_item(self):
        del self.map["KEY1"]
        del self.map["K e Y 3"]

        self.assertNotIn("key1", self.map)
        self.assertIn("key2", self.map)
        self.assertNotIn("key3", self.map)

    def test_keys_in_insertion_order(self):
        self.assertEqual(["key1", "key2", "key3"], list(self.map.keys()))

    def test_adjusted_keys(self):
        self.map["New Key"] = "value4"
        self.assertEqual(["key1", "key2", "key3", "newkey"], list(self.map.adjusted_keys()))

    def test_copy(self):
        copy_map = self.map.copy()
        self.assertIsNot(copy_map, self.map)
        self.assertEqual(copy_map, self.map)

    def test_equality_case_and_space_insensitive(self):
        other_map = CaseAndSpaceInsensitiveDict({"key1": "value1", "KEY2": "value2", "K e Y 3": "value3"})
        self.assertEqual(self.map, other_map)

    def test_inequality(self):
        other_map = CaseAndSpaceInsensitiveDict({"key1": "value1", "key 2": "wrong", "key3": "value3"})
        self.assertNotEqual(self.map, other_map)

    def test_keyerror_on_nonexistent_key(self):
        with self.assertRaises(KeyError):
            _ = self.map["nonexistent_key"]

    def test_non_str_key(self):
        with self.assertRaises(TypeError):
            self.map[1] = "value"


if __name__ == '__main__':
    unittest.main()
