# -*- coding: utf-8 -*-

from enum import Enum
from typing import Dict, Union

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import case_and_space_insensitive_equals, expect_dict, load_json


class ElementAttribute(TM1Object):
    """ Abstraction of TM1 Element Attributes

    """

    class Types(Enum):
        NUMERIC = 1
        STRING = 2
        ALIAS = 3

        def __str__(self):
            return self.name.capitalize()

        @classmethod
        def _missing_(cls, value: str):
            if isinstance(value, str):
                for member in cls:
                    if member.name.lower() == value.replace(" ", "").lower():
                        return member
            raise ValueError(f"Invalid attribute type: '{value}'")

    def __init__(self, name: str, attribute_type: Union[Types, str]):
        self.name = name
        self.attribute_type = attribute_type

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def attribute_type(self) -> str:
        return str(self._attribute_type)

    @attribute_type.setter
    def attribute_type(self, value: Union[Types, str]):
        self._attribute_type = ElementAttribute.Types(value)

    @property
    def body_as_dict(self) -> Dict:
        return {"Name": self._name, "Type": self.attribute_type}

    @classmethod
    def from_json(cls, element_attribute_as_json: str) -> 'ElementAttribute':
        return cls.from_dict(load_json(element_attribute_as_json, "ElementAttribute"))

    @classmethod
    def from_dict(cls, element_attribute_as_dict: Dict) -> 'ElementAttribute':
        element_attribute_as_dict = expect_dict(element_attribute_as_dict, "ElementAttribute")
        try:
            return cls(name=element_attribute_as_dict.get('Name') or '',
                       attribute_type=element_attribute_as_dict.get('Type', 'String'))
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "ElementAttribute") from e

    def __eq__(self, other: Union[str, 'ElementAttribute']):
        """ attributes are identified by their name only, e.g. ElementAttribute("Code", "Alias") == "code" """
        if isinstance(other, str):
            return case_and_space_insensitive_equals(self.name, other)
        elif isinstance(other, ElementAttribute):
            return case_and_space_insensitive_equals(self.name, other.name)
        return NotImplemented

    def __hash__(self):
        return hash(self._name.replace(" ", "").lower())
