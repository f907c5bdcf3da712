# -*- coding: utf-8 -*-

import collections
from typing import Any, Dict, Iterable, List, Optional

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, expect_list, load_json


class BatchRequest(TM1Object):
    """ One request of a TM1 $batch call

        depends_on is an ordered list of ids of requests in the same batch
        that must be executed before this one
    """

    def __init__(self, request_id: str, method: str, url: str, body: Any = None,
                 headers: Dict[str, str] = None, depends_on: Iterable[str] = None):
        self._id = request_id
        self._method = method
        self._url = url
        self._body = body
        self._headers = dict(headers) if headers else {}
        self._depends_on = list(depends_on) if depends_on else []

    @classmethod
    def from_dict(cls, request_as_dict: Dict) -> 'BatchRequest':
        request_as_dict = expect_dict(request_as_dict, "BatchRequest")
        return cls(
            request_id=request_as_dict.get('id', ''),
            method=request_as_dict.get('method', ''),
            url=request_as_dict.get('url', ''),
            body=request_as_dict.get('body'),
            headers=expect_dict(request_as_dict.get('headers') or {}, "BatchRequest"),
            depends_on=expect_list(request_as_dict.get('dependsOn'), "BatchRequest"))

    @property
    def id(self) -> str:
        return self._id

    @property
    def method(self) -> str:
        return self._method

    @property
    def url(self) -> str:
        return self._url

    @property
    def request_body(self) -> Any:
        return self._body

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    @property
    def depends_on(self) -> List[str]:
        return self._depends_on

    def add_dependency(self, request_id: str):
        self._depends_on.append(request_id)

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['method'] = self._method
        body_as_dict['url'] = self._url
        body_as_dict['id'] = self._id
        if self._body is not None:
            body_as_dict['body'] = self._body.body_as_dict if isinstance(self._body, TM1Object) else self._body
        if self._headers:
            body_as_dict['headers'] = self._headers
        if self._depends_on:
            body_as_dict['dependsOn'] = self._depends_on
        return body_as_dict


class BatchRequests(TM1Object):
    """ Ordered collection of BatchRequest, the body of a $batch call

        ids are unique and dependsOn must refer to requests that were added before
    """

    def __init__(self, requests: Iterable[BatchRequest] = None):
        self._requests = []
        for request in requests or []:
            self.add_request(request)

    @property
    def requests(self) -> List[BatchRequest]:
        return self._requests

    @property
    def ids(self) -> List[str]:
        return [request.id for request in self._requests]

    def add_request(self, request: BatchRequest):
        if request.id in self.ids:
            raise ValueError(f"Request id '{request.id}' must be unique within batch")
        for request_id in request.depends_on:
            if request_id not in self.ids:
                raise ValueError(f"Request '{request.id}' depends on unknown request '{request_id}'")
        self._requests.append(request)

    def __iter__(self):
        return iter(self._requests)

    def __len__(self):
        return len(self._requests)

    @property
    def body_as_dict(self) -> Dict:
        return {'requests': [request.body_as_dict for request in self._requests]}


class BatchResponse(TM1Object):

    def __init__(self, response_id: str, status: int, headers: Dict[str, str] = None, body: Any = None):
        self._id = response_id
        self._status = status
        self._headers = dict(headers) if headers else {}
        self._body = body

    @classmethod
    def from_dict(cls, response_as_dict: Dict) -> 'BatchResponse':
        response_as_dict = expect_dict(response_as_dict, "BatchResponse")
        status = response_as_dict.get('status', 0)
        if not isinstance(status, int) or isinstance(status, bool):
            raise TM1modelDecodeException(f"status must be an integer, not '{status}'", "BatchResponse")
        return cls(
            response_id=response_as_dict.get('id', ''),
            status=status,
            headers=expect_dict(response_as_dict.get('headers') or {}, "BatchResponse"),
            body=response_as_dict.get('body'))

    @property
    def id(self) -> str:
        return self._id

    @property
    def status(self) -> int:
        return self._status

    @property
    def ok(self) -> bool:
        return 200 <= self._status < 300

    @property
    def headers(self) -> Dict[str, str]:
        return self._headers

    @property
    def response_body(self) -> Any:
        return self._body

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['id'] = self._id
        body_as_dict['status'] = self._status
        body_as_dict['headers'] = self._headers
        if self._body is not None:
            body_as_dict['body'] = self._body
        return body_as_dict


class BatchResponses(TM1Object):
    """ Payload returned by the $batch endpoint: {"responses": [...]}

    """

    def __init__(self, responses: Iterable[BatchResponse] = None):
        self._responses = list(responses) if responses else []

    @classmethod
    def from_json(cls, responses_as_json: str) -> 'BatchResponses':
        return cls.from_dict(load_json(responses_as_json, "BatchResponses"))

    @classmethod
    def from_dict(cls, responses_as_dict: Dict) -> 'BatchResponses':
        responses_as_dict = expect_dict(responses_as_dict, "BatchResponses")
        return cls(responses=[
            BatchResponse.from_dict(response)
            for response
            in expect_list(responses_as_dict.get('responses'), "BatchResponses")])

    @property
    def responses(self) -> List[BatchResponse]:
        return self._responses

    def get_response(self, response_id: str) -> Optional[BatchResponse]:
        for response in self._responses:
            if response.id == response_id:
                return response
        return None

    def __iter__(self):
        return iter(self._responses)

    def __len__(self):
        return len(self._responses)

    @property
    def body_as_dict(self) -> Dict:
        return {'responses': [response.body_as_dict for response in self._responses]}
