import datetime
import unittest

import pytz

from TM1model.Exceptions import (
    TM1modelDecodeException,
    TM1modelEncodeException,
    TM1modelInvalidNameException,
    TM1modelMissingBindingException,
)
from TM1model.Utils import (
    dimension_name_from_unique_name,
    dimension_reference,
    dump_body,
    element_reference,
    expect_list,
    format_url,
    hierarchy_name_from_unique_name,
    hierarchy_reference,
    load_json,
    parse_odata_timestamp,
    read_object_name_from_url,
    subset_reference,
)


class TestUtils(unittest.TestCase):

    def test_dimension_reference(self):
        self.assertEqual("Dimensions('Region')", dimension_reference("Region"))

    def test_dimension_reference_with_space(self):
        self.assertEqual("Dimensions('Cost%20Center')", dimension_reference("Cost Center"))

    def test_hierarchy_reference(self):
        self.assertEqual(
            "Dimensions('Region')/Hierarchies('By%20Country')",
            hierarchy_reference("Region", "By Country"))

    def test_element_reference(self):
        self.assertEqual(
            "Dimensions('Region')/Hierarchies('Region')/Elements('South%20West')",
            element_reference("Region", "Region", "South West"))

    def test_subset_reference(self):
        self.assertEqual(
            "Dimensions('Region')/Hierarchies('Region')/Subsets('Top10')",
            subset_reference("Region", "Region", "Top10"))

    def test_reference_unreserved_characters_not_encoded(self):
        self.assertEqual("Dimensions('a-b.c_d~e')", dimension_reference("a-b.c_d~e"))

    def test_reference_reserved_characters_encoded(self):
        self.assertEqual("Dimensions('a%2Fb%3Fc%23d%26e%25')", dimension_reference("a/b?c#d&e%"))

    def test_reference_non_ascii_encoded_as_utf8(self):
        self.assertEqual("Dimensions('M%C3%A4rz')", dimension_reference("März"))

    def test_reference_single_quote_rejected(self):
        with self.assertRaises(TM1modelInvalidNameException) as error:
            element_reference("Region", "Region", "Côte d'Ivoire")
        self.assertEqual("Côte d'Ivoire", error.exception.name)

    def test_reference_empty_name(self):
        with self.assertRaises(TM1modelMissingBindingException) as error:
            hierarchy_reference("Region", "")
        self.assertEqual("hierarchy_name", error.exception.field)

    def test_reference_none_name(self):
        with self.assertRaises(TM1modelMissingBindingException):
            dimension_reference(None)

    def test_format_url_args(self):
        url = format_url("/Processes('{}')/tm1.Execute", "process name")
        self.assertEqual("/Processes('process%20name')/tm1.Execute", url)

    def test_format_url_kwargs(self):
        url = format_url("/Cubes('{cube}')/Views('{view}')", cube="c 1", view="v1")
        self.assertEqual("/Cubes('c%201')/Views('v1')", url)

    def test_format_url_non_str_args_unchanged(self):
        self.assertEqual("/Chores?$top=5", format_url("/Chores?$top={}", 5))

    def test_read_object_name_from_url(self):
        self.assertEqual(
            "load sales",
            read_object_name_from_url("Processes('load%20sales')", r"^Processes\('(.*)'\)$"))

    def test_read_object_name_from_url_no_match(self):
        self.assertIsNone(read_object_name_from_url("Cubes('c1')", r"^Processes\('(.*)'\)$"))

    def test_dimension_name_from_unique_name(self):
        self.assertEqual("d1", dimension_name_from_unique_name("[d1].[h1].[s1]"))

    def test_dimension_name_from_unique_name_no_brackets(self):
        self.assertEqual("", dimension_name_from_unique_name("s1"))

    def test_hierarchy_name_from_unique_name(self):
        self.assertEqual("h1", hierarchy_name_from_unique_name("[d1].[h1].[s1]"))

    def test_hierarchy_name_from_unique_name_without_hierarchy(self):
        self.assertIsNone(hierarchy_name_from_unique_name("[d1].[s1]"))

    def test_parse_odata_timestamp_utc(self):
        self.assertEqual(
            datetime.datetime(2025, 7, 26, 10, 53, 18, 870000, tzinfo=pytz.utc),
            parse_odata_timestamp("2025-07-26T10:53:18.870Z"))

    def test_parse_odata_timestamp_with_offset(self):
        self.assertEqual(
            datetime.datetime(2020, 11, 5, 7, 0, 1, tzinfo=pytz.utc),
            parse_odata_timestamp("2020-11-05T08:00:01+01:00"))

    def test_parse_odata_timestamp_without_seconds(self):
        self.assertEqual(
            datetime.datetime(2016, 9, 25, 20, 25, tzinfo=pytz.utc),
            parse_odata_timestamp("2016-09-25T20:25Z"))

    def test_parse_odata_timestamp_none(self):
        self.assertIsNone(parse_odata_timestamp(None))

    def test_parse_odata_timestamp_invalid(self):
        with self.assertRaises(TM1modelDecodeException):
            parse_odata_timestamp("yesterday")

    def test_parse_odata_timestamp_invalid_date(self):
        with self.assertRaises(TM1modelDecodeException):
            parse_odata_timestamp("2020-13-05T08:00:01Z")

    def test_load_json_malformed(self):
        with self.assertRaises(TM1modelDecodeException) as error:
            load_json('{"Name": ', "Cube")
        self.assertIn("Cube", str(error.exception))
        self.assertIsNotNone(error.exception.__cause__)

    def test_expect_list_none(self):
        self.assertEqual([], expect_list(None, "Hierarchy"))

    def test_expect_list_object(self):
        with self.assertRaises(TM1modelDecodeException):
            expect_list({"Name": "e1"}, "Hierarchy")

    def test_dump_body_not_serializable(self):
        with self.assertRaises(TM1modelEncodeException):
            dump_body({"Name": object()})

    def test_dump_body_keeps_non_ascii(self):
        self.assertEqual('{"Name": "März"}', dump_body({"Name": "März"}))


if __name__ == '__main__':
    unittest.main()
