# -*- coding: utf-8 -*-

import collections
import logging
import re
from typing import Dict, Iterable, List, Optional
from urllib.parse import unquote

from TM1model.Exceptions import TM1modelMissingBindingException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import (
    dimension_name_from_unique_name,
    element_reference,
    expect_dict,
    expect_list,
    hierarchy_reference,
    load_json,
    name_of,
    read_object_name_from_url,
)

logger = logging.getLogger(__name__)

HIERARCHY_BINDING_PATTERN = re.compile(r"^Dimensions\('(.*)'\)/Hierarchies\('(.*)'\)$")
ELEMENT_BINDING_PATTERN = r"^.*/Elements\('(.*)'\)$"


class Subset(TM1Object):
    """ Abstraction of the TM1 Subset (dynamic and static)

        same logic here as in TM1: when subset has expression its dynamic, otherwise static.
        Setting an expression clears the elements, adding elements clears the expression.
    """

    def __init__(self, subset_name: str, dimension_name: str, hierarchy_name: str = None, alias: str = None,
                 expression: str = None, elements: Iterable[str] = None):
        """

        :param subset_name: String
        :param dimension_name: String
        :param hierarchy_name: String, defaults to dimension_name
        :param alias: String, alias that is active in this subset.
        :param expression: String, MDX set expression. Takes precedence over elements
        :param elements: List, element names
        """
        self._subset_name = subset_name
        self._dimension_name = dimension_name
        self._hierarchy_name = hierarchy_name if hierarchy_name else dimension_name
        self._alias = alias
        self._expression = expression if expression else None
        self._elements = list(elements) if elements and not expression else []

    @classmethod
    def static(cls, subset_name: str, dimension_name: str, hierarchy_name: str = None,
               elements: Iterable[str] = None, alias: str = None) -> 'Subset':
        return cls(subset_name=subset_name, dimension_name=dimension_name, hierarchy_name=hierarchy_name,
                   alias=alias, elements=elements)

    @classmethod
    def dynamic(cls, subset_name: str, dimension_name: str, hierarchy_name: str = None,
                expression: str = None, alias: str = None) -> 'Subset':
        return cls(subset_name=subset_name, dimension_name=dimension_name, hierarchy_name=hierarchy_name,
                   alias=alias, expression=expression)

    @property
    def name(self) -> str:
        return self._subset_name

    @name.setter
    def name(self, value: str):
        self._subset_name = value

    @property
    def dimension_name(self) -> str:
        return self._dimension_name

    @dimension_name.setter
    def dimension_name(self, value: str):
        self._dimension_name = value

    @property
    def hierarchy_name(self) -> str:
        return self._hierarchy_name

    @hierarchy_name.setter
    def hierarchy_name(self, value: str):
        self._hierarchy_name = value

    @property
    def alias(self) -> Optional[str]:
        return self._alias

    @alias.setter
    def alias(self, value: str):
        self._alias = value

    @property
    def expression(self) -> Optional[str]:
        return self._expression

    @expression.setter
    def expression(self, value: str):
        self.set_expression(value)

    @property
    def elements(self) -> List[str]:
        return self._elements

    @elements.setter
    def elements(self, value: Iterable[str]):
        self._elements = []
        self.add_elements(value or [])

    @property
    def type(self) -> str:
        if self.is_dynamic:
            return 'dynamic'
        return 'static'

    @property
    def is_dynamic(self) -> bool:
        return bool(self._expression)

    @property
    def is_static(self) -> bool:
        return not self.is_dynamic

    def add_elements(self, elements: Iterable[str]):
        """ add Elements to the subset. Turns a dynamic subset into a static one

        :param elements: list of element names
        """
        self._elements = self._elements + list(elements)
        self._expression = None

    def set_expression(self, expression: str):
        """ set the MDX expression. Turns a static subset into a dynamic one

        :param expression: MDX set expression
        """
        self._expression = expression if expression else None
        self._elements = []

    @classmethod
    def from_json(cls, subset_as_json: str) -> 'Subset':
        """ Alternative constructor
                :Parameters:
                    `subset_as_json` : string, JSON
                        representation of Subset as specified in CSDL

                :Returns:
                    `Subset` : an instance of this class
        """
        return cls.from_dict(load_json(subset_as_json, "Subset"))

    @classmethod
    def from_dict(cls, subset_as_dict: Dict) -> 'Subset':
        """ Alternative constructor

        dimension and hierarchy name are taken from the expanded Hierarchy (and Hierarchy/Dimension),
        from Hierarchy@odata.bind (request shape) or, if neither is present,
        the dimension name is read from the UniqueName: [dim].[hier].[subset]

        :param subset_as_dict: Dictionary, Subset as returned by TM1
        :return: an instance of this class
        """
        subset_as_dict = expect_dict(subset_as_dict, "Subset")

        dimension_name, hierarchy_name = "", ""
        hierarchy = subset_as_dict.get("Hierarchy")
        binding = subset_as_dict.get("Hierarchy@odata.bind")
        hierarchy_binding = HIERARCHY_BINDING_PATTERN.match(binding) if isinstance(binding, str) else None
        if isinstance(hierarchy, dict):
            hierarchy_name = name_of(hierarchy) or ""
            dimension_name = name_of(hierarchy.get("Dimension")) or ""
        elif hierarchy_binding:
            dimension_name, hierarchy_name = (unquote(name) for name in hierarchy_binding.groups())
        elif isinstance(subset_as_dict.get("UniqueName"), str):
            dimension_name = dimension_name_from_unique_name(subset_as_dict["UniqueName"])
            logger.debug("Read dimension name '%s' from subset unique name '%s'",
                         dimension_name, subset_as_dict["UniqueName"])

        if not hierarchy_name:
            hierarchy_name = dimension_name

        expression = subset_as_dict.get("Expression")
        if not isinstance(expression, str) or not expression:
            expression = None

        elements = None
        if not expression and "Elements" not in subset_as_dict and "Elements@odata.bind" in subset_as_dict:
            # request shape: element references instead of expanded elements
            elements = [
                read_object_name_from_url(binding, ELEMENT_BINDING_PATTERN) or ""
                for binding
                in expect_list(subset_as_dict["Elements@odata.bind"], "Subset")]
        elif not expression:
            elements = [
                name_of(element) or ""
                for element
                in expect_list(subset_as_dict.get("Elements"), "Subset")]

        return cls(subset_name=subset_as_dict.get("Name") or "",
                   dimension_name=dimension_name,
                   hierarchy_name=hierarchy_name,
                   alias=subset_as_dict.get("Alias") or None,
                   expression=expression,
                   elements=elements)

    def _require_bindings(self):
        for field in ("dimension_name", "hierarchy_name"):
            if not getattr(self, field):
                raise TM1modelMissingBindingException(field, f"Subset '{self._subset_name}'")

    @property
    def body_as_dict(self) -> Dict:
        """ body for the standalone creation of a subset in /Dimensions('d')/Hierarchies('h')/Subsets
        """
        if not self._subset_name:
            raise TM1modelMissingBindingException("name", "Subset")
        self._require_bindings()

        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._subset_name
        if self._alias:
            body_as_dict['Alias'] = self._alias
        body_as_dict['Hierarchy@odata.bind'] = hierarchy_reference(self._dimension_name, self._hierarchy_name)
        if self.is_dynamic:
            body_as_dict['Expression'] = self._expression
        elif self._elements:
            body_as_dict['Elements@odata.bind'] = self._element_bindings()
        return body_as_dict

    def view_body_as_dict(self, static: bool = True) -> Dict:
        """ body of the subset when it is embedded in the axis of a NativeView

        :param static: materialize the elements of static subsets. If False, static subsets are reduced
        to their expression (if any)
        """
        self._require_bindings()

        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._subset_name
        if self._alias:
            body_as_dict['Alias'] = self._alias
        body_as_dict['Hierarchy@odata.bind'] = hierarchy_reference(self._dimension_name, self._hierarchy_name)
        if static and self._elements:
            body_as_dict['Elements@odata.bind'] = self._element_bindings()
        elif self._expression:
            body_as_dict['Expression'] = self._expression
        return body_as_dict

    def _element_bindings(self) -> List[str]:
        return [
            element_reference(self._dimension_name, self._hierarchy_name, element)
            for element
            in self._elements]
