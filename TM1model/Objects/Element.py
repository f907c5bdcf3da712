# -*- coding: utf-8 -*-

import collections
from enum import Enum
from typing import Dict, List, Optional, Union

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict


class Element(TM1Object):
    """ Abstraction of TM1 Element

    """

    class Types(Enum):
        NUMERIC = 1
        STRING = 2
        CONSOLIDATED = 3

        def __str__(self):
            return self.name.capitalize()

        @classmethod
        def _missing_(cls, value: str):
            if isinstance(value, str):
                for member in cls:
                    if member.name.lower() == value.replace(" ", "").lower():
                        return member
            raise ValueError(f"Invalid element type: '{value}'")

    def __init__(self, name: str, element_type: Union[Types, str], index: Optional[int] = None,
                 unique_name: Optional[str] = None, attributes: Optional[List[str]] = None):
        self._name = name
        self._element_type = None
        self.element_type = element_type
        self._index = index
        self._unique_name = unique_name
        self._attributes = attributes

    @classmethod
    def from_dict(cls, element_as_dict: Dict) -> 'Element':
        element_as_dict = expect_dict(element_as_dict, "Element")
        try:
            return cls(name=element_as_dict.get('Name') or '',
                       element_type=element_as_dict.get('Type', 'Numeric'),
                       index=element_as_dict.get('Index'),
                       unique_name=element_as_dict.get('UniqueName'),
                       attributes=element_as_dict.get('Attributes'))
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "Element") from e

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def element_type(self) -> Types:
        return self._element_type

    @element_type.setter
    def element_type(self, value: Union[Types, str]):
        self._element_type = Element.Types(value)

    @property
    def index(self) -> Optional[int]:
        return self._index

    @property
    def unique_name(self) -> Optional[str]:
        return self._unique_name

    @property
    def element_attributes(self) -> Optional[List[str]]:
        return self._attributes

    @property
    def is_consolidated(self) -> bool:
        return self._element_type is Element.Types.CONSOLIDATED

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._name
        body_as_dict['Type'] = str(self._element_type)
        return body_as_dict
