import json
import unittest

from TM1model import BatchRequest, BatchRequests, BatchResponses, Subset
from TM1model.Exceptions import TM1modelDecodeException


class TestBatchRequests(unittest.TestCase):

    def setUp(self):
        self.subset = Subset.static("Top10", "Region", elements=["North"])
        self.requests = BatchRequests([
            BatchRequest("1", "POST", "Dimensions('Region')/Hierarchies('Region')/Subsets", body=self.subset),
            BatchRequest("2", "GET", "Dimensions('Region')/Hierarchies('Region')/Subsets('Top10')",
                         headers={"Accept": "application/json"}, depends_on=["1"])])

    def test_body(self):
        body = json.loads(self.requests.body)

        self.assertEqual(["1", "2"], [request["id"] for request in body["requests"]])
        self.assertEqual(self.subset.body_as_dict, body["requests"][0]["body"])
        self.assertNotIn("dependsOn", body["requests"][0])
        self.assertEqual(["1"], body["requests"][1]["dependsOn"])
        self.assertEqual({"Accept": "application/json"}, body["requests"][1]["headers"])

    def test_body_key_order(self):
        self.assertEqual(["method", "url", "id", "body"], list(self.requests.requests[0].body_as_dict))

    def test_plain_body(self):
        request = BatchRequest("3", "PATCH", "Cubes('c1')", body={"Rules": ""})
        self.assertEqual({"Rules": ""}, request.body_as_dict["body"])

    def test_duplicate_id(self):
        with self.assertRaises(ValueError):
            self.requests.add_request(BatchRequest("1", "DELETE", "Cubes('c1')"))

    def test_unknown_dependency(self):
        with self.assertRaises(ValueError):
            self.requests.add_request(BatchRequest("3", "DELETE", "Cubes('c1')", depends_on=["4"]))

    def test_len_and_ids(self):
        self.assertEqual(2, len(self.requests))
        self.assertEqual(["1", "2"], self.requests.ids)

    def test_request_from_dict(self):
        request = BatchRequest.from_dict({"id": "7", "method": "GET", "url": "Cubes", "dependsOn": ["1"]})

        self.assertEqual("7", request.id)
        self.assertEqual(["1"], request.depends_on)


class TestBatchResponses(unittest.TestCase):
    responses_json = """
    {
        "responses": [
            {"id": "1", "status": 201, "headers": {"Content-Type": "application/json"}, "body": {"Name": "Top10"}},
            {"id": "2", "status": 404, "headers": {}}
        ]
    }
    """

    def test_from_json(self):
        responses = BatchResponses.from_json(self.responses_json)

        self.assertEqual(2, len(responses))
        self.assertTrue(responses.get_response("1").ok)
        self.assertEqual({"Name": "Top10"}, responses.get_response("1").response_body)
        self.assertFalse(responses.get_response("2").ok)
        self.assertIsNone(responses.get_response("2").response_body)

    def test_get_response_unknown_id(self):
        responses = BatchResponses.from_json(self.responses_json)
        self.assertIsNone(responses.get_response("3"))

    def test_body(self):
        responses = BatchResponses.from_json(self.responses_json)
        self.assertEqual(json.loads(self.responses_json), json.loads(responses.body))

    def test_status_not_an_integer(self):
        with self.assertRaises(TM1modelDecodeException):
            BatchResponses.from_dict({"responses": [{"id": "1", "status": "200"}]})

    def test_responses_not_a_list(self):
        with self.assertRaises(TM1modelDecodeException):
            BatchResponses.from_dict({"responses": {"id": "1", "status": 200}})


if __name__ == '__main__':
    unittest.main()
