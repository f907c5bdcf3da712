import datetime
import unittest

import pytz

from TM1model import Content, extract_names_from_contents


class TestContent(unittest.TestCase):
    content_as_dict = {
        "@odata.type": "#ibm.tm1.api.v1.Folder",
        "ID": "A",
        "Name": "A",
        "Contents": [
            {
                "@odata.type": "#ibm.tm1.api.v1.Folder",
                "ID": "B",
                "Name": "B",
                "Contents": [
                    {
                        "@odata.type": "#ibm.tm1.api.v1.Document",
                        "ID": "D",
                        "Name": "D",
                        "Size": 1024,
                        "LastUpdated": "2023-03-01T12:30:00.000Z",
                        "Content@odata.mediaContentType": "text/csv"
                    }
                ]
            },
            {
                "@odata.type": "#ibm.tm1.api.v1.Folder",
                "ID": "C",
                "Name": "C"
            }
        ]
    }

    def setUp(self):
        self.content = Content.from_dict(self.content_as_dict)

    def test_extract_names(self):
        self.assertEqual(["A", "A/B", "A/B/D", "A/C"], self.content.extract_names())

    def test_extract_names_from_contents(self):
        self.assertEqual(["B", "B/D", "C"], extract_names_from_contents(self.content.contents))

    def test_extract_names_with_parent_path(self):
        self.assertEqual(["Files/C"], self.content.contents[1].extract_names("Files"))

    def test_is_folder(self):
        self.assertTrue(self.content.is_folder)
        self.assertTrue(self.content.contents[1].is_folder)
        self.assertFalse(self.content.contents[0].contents[0].is_folder)

    def test_is_folder_from_children(self):
        self.assertTrue(Content("X", contents=[Content("Y")]).is_folder)

    def test_document(self):
        document = self.content.contents[0].contents[0]

        self.assertEqual(1024, document.size)
        self.assertEqual("text/csv", document.media_content_type)
        self.assertEqual(
            datetime.datetime(2023, 3, 1, 12, 30, tzinfo=pytz.utc),
            document.last_updated_datetime)

    def test_last_updated_missing(self):
        self.assertIsNone(self.content.last_updated_datetime)

    def test_add_content(self):
        self.content.add_content(Content("E"))
        self.assertEqual(["A", "A/B", "A/B/D", "A/C", "A/E"], self.content.extract_names())

    def test_body(self):
        self.assertEqual(self.content_as_dict, Content.from_json(self.content.body).body_as_dict)


if __name__ == '__main__':
    unittest.main()
