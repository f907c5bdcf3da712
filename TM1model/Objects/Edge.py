# -*- coding: utf-8 -*-

import collections
from typing import Dict

from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict


class Edge(TM1Object):
    """ Abstraction of a TM1 Edge: a directed parent -> component link within a hierarchy

    The child element is called component, like in the TM1 REST API
    where the key is 'ComponentName'.
    """

    def __init__(self, parent_name: str, component_name: str, weight: float = 1.0):
        self._parent_name = parent_name
        self._component_name = component_name
        self._weight = weight

    @classmethod
    def from_dict(cls, edge_as_dict: Dict) -> 'Edge':
        edge_as_dict = expect_dict(edge_as_dict, "Edge")
        # Weight is omitted on the wire when it is zero
        return cls(parent_name=edge_as_dict.get('ParentName') or '',
                   component_name=edge_as_dict.get('ComponentName') or '',
                   weight=edge_as_dict.get('Weight', 0.0))

    @property
    def parent_name(self) -> str:
        return self._parent_name

    @property
    def component_name(self) -> str:
        return self._component_name

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float):
        self._weight = value

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['ParentName'] = self._parent_name
        body_as_dict['ComponentName'] = self._component_name
        if self._weight:
            body_as_dict['Weight'] = self._weight
        return body_as_dict
