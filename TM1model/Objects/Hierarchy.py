# -*- coding: utf-8 -*-

import collections
import logging
from typing import Dict, Iterable, List, Optional, Set, Union

import networkx as nx

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.Edge import Edge
from TM1model.Objects.Element import Element
from TM1model.Objects.ElementAttribute import ElementAttribute
from TM1model.Objects.Subset import Subset
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import (
    CaseAndSpaceInsensitiveDict,
    case_and_space_insensitive_equals,
    dimension_name_from_unique_name,
    expect_dict,
    expect_list,
    load_json,
    name_of,
)

logger = logging.getLogger(__name__)


class Hierarchy(TM1Object):
    """ Abstraction of TM1 Hierarchy
        Requires reference to a Dimension

        Elements modeled as a Dictionary where key is the element name and value an instance of TM1model.Element
        {
            'US': instance of TM1model.Element,
            'CN': instance of TM1model.Element,
            'AU': instance of TM1model.Element
        }

        Edges, ElementAttributes and Subsets are ordered lists of
        TM1model.Edge, TM1model.ElementAttribute and TM1model.Subset.
        dimension_name is a back-pointer to the owning dimension and is never part of the body.
    """

    def __init__(
            self,
            name: str,
            dimension_name: str,
            elements: Optional[Iterable[Element]] = None,
            element_attributes: Optional[Iterable[ElementAttribute]] = None,
            edges: Optional[Iterable[Edge]] = None,
            subsets: Optional[Iterable[Subset]] = None):

        self._name = name
        self._elements: Dict[str, Element] = CaseAndSpaceInsensitiveDict()
        for element in elements or []:
            self._elements[element.name] = element
        self._element_attributes = list(element_attributes) if element_attributes else []
        self._edges = list(edges) if edges else []
        self._subsets = []
        self._dimension_name = None
        self.dimension_name = dimension_name
        for subset in subsets or []:
            self.add_subset(subset)

    @classmethod
    def from_json(cls, hierarchy_as_json: str, dimension_name: str = None) -> 'Hierarchy':
        return cls.from_dict(load_json(hierarchy_as_json, "Hierarchy"), dimension_name=dimension_name)

    @classmethod
    def from_dict(cls, hierarchy_as_dict: Dict, dimension_name: str = None) -> 'Hierarchy':
        hierarchy_as_dict = expect_dict(hierarchy_as_dict, "Hierarchy")

        if not dimension_name:
            dimension_name = name_of(hierarchy_as_dict.get('Dimension'))
        if not dimension_name and isinstance(hierarchy_as_dict.get('UniqueName'), str):
            dimension_name = dimension_name_from_unique_name(hierarchy_as_dict['UniqueName'])
            logger.debug("Read dimension name '%s' from hierarchy unique name", dimension_name)

        elements = [Element.from_dict(element)
                    for element in expect_list(hierarchy_as_dict.get('Elements'), "Hierarchy")]
        element_attributes = [ElementAttribute.from_dict(element_attribute)
                              for element_attribute
                              in expect_list(hierarchy_as_dict.get('ElementAttributes'), "Hierarchy")]
        edges = [Edge.from_dict(edge) for edge in expect_list(hierarchy_as_dict.get('Edges'), "Hierarchy")]
        subsets = [Subset.from_dict(subset)
                   for subset in expect_list(hierarchy_as_dict.get('Subsets'), "Hierarchy")]
        try:
            return cls(
                name=hierarchy_as_dict.get('Name') or '',
                dimension_name=dimension_name or '',
                elements=elements,
                element_attributes=element_attributes,
                edges=edges,
                subsets=subsets)
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "Hierarchy") from e

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value
        for subset in self._subsets:
            subset.hierarchy_name = value

    @property
    def dimension_name(self) -> str:
        return self._dimension_name

    @dimension_name.setter
    def dimension_name(self, dimension_name: str):
        self._dimension_name = dimension_name
        for subset in self._subsets:
            subset.dimension_name = dimension_name

    @property
    def elements(self) -> Dict[str, Element]:
        return self._elements

    @property
    def element_attributes(self) -> List[ElementAttribute]:
        return self._element_attributes

    @property
    def edges(self) -> List[Edge]:
        return self._edges

    @property
    def subsets(self) -> List[Subset]:
        return self._subsets

    @property
    def subset_names(self) -> List[str]:
        return [subset.name for subset in self._subsets]

    def contains_element(self, element_name: str) -> bool:
        return element_name in self._elements

    def get_element(self, element_name: str) -> Element:
        if element_name in self._elements:
            return self._elements[element_name]
        raise ValueError("Element: {} not found in Hierarchy: {}".format(element_name, self.name))

    def add_element(self, element_name: str, element_type: Union[str, Element.Types]):
        if element_name in self._elements:
            raise ValueError("Element name must be unique")
        self._elements[element_name] = Element(name=element_name, element_type=element_type)

    def update_element(self, element_name: str, element_type: Union[str, Element.Types]):
        self.get_element(element_name).element_type = element_type

    def remove_element(self, element_name: str):
        if element_name not in self._elements:
            return
        del self._elements[element_name]
        self._edges = [
            edge
            for edge
            in self._edges
            if not case_and_space_insensitive_equals(edge.parent_name, element_name)
            and not case_and_space_insensitive_equals(edge.component_name, element_name)]

    def get_edge(self, parent_name: str, component_name: str) -> Optional[Edge]:
        for edge in self._edges:
            if case_and_space_insensitive_equals(edge.parent_name, parent_name) and \
                    case_and_space_insensitive_equals(edge.component_name, component_name):
                return edge
        return None

    def add_edge(self, parent_name: str, component_name: str, weight: float = 1.0):
        edge = self.get_edge(parent_name, component_name)
        if edge:
            edge.weight = weight
        else:
            self._edges.append(Edge(parent_name, component_name, weight))

    def remove_edge(self, parent_name: str, component_name: str):
        edge = self.get_edge(parent_name, component_name)
        if edge:
            self._edges.remove(edge)

    def add_component(self, parent_name: str, component_name: str, weight: float = 1.0):
        if parent_name not in self._elements:
            raise ValueError(f"Parent '{parent_name}' does not exist in hierarchy")
        if not self._elements[parent_name].is_consolidated:
            raise ValueError(f"Parent '{parent_name}' is not of type 'Consolidated'")

        if component_name not in self._elements:
            self.add_element(component_name, Element.Types.NUMERIC)
        elif self._elements[component_name].element_type is Element.Types.STRING:
            raise ValueError(f"Component '{component_name}' must not be of type 'String'")

        is_new_edge = self.get_edge(parent_name, component_name) is None
        self.add_edge(parent_name, component_name, weight)
        if is_new_edge:
            try:
                self.validate_edges()
            except ValueError:
                self.remove_edge(parent_name, component_name)
                raise

    def validate_edges(self):
        """ raise ValueError if the edges contain circular references
        """
        graph = nx.DiGraph()
        for edge in self._edges:
            graph.add_edge(self._element_name(edge.component_name), self._element_name(edge.parent_name))

        cycles = list(nx.simple_cycles(graph))
        if cycles:
            raise ValueError(f"Circular reference{'s' if len(cycles) > 1 else ''} found in edges: {cycles}")

    def _element_name(self, element_name: str) -> str:
        # spelling of the element, edges may differ in case and spaces
        element = self._elements.get(element_name)
        return element.name if element is not None else element_name

    def get_ancestors(self, element_name: str, recursive: bool = False) -> Set[str]:
        ancestors = set()
        for edge in self._edges:
            if not case_and_space_insensitive_equals(edge.component_name, element_name):
                continue
            ancestors.add(edge.parent_name)
            if recursive:
                ancestors |= self.get_ancestors(edge.parent_name, True)
        return ancestors

    def get_descendants(self, element_name: str, recursive: bool = False, leaves_only: bool = False) -> Set[str]:
        descendants = set()
        for edge in self._edges:
            if not case_and_space_insensitive_equals(edge.parent_name, element_name):
                continue
            component = self._elements.get(edge.component_name)
            is_consolidated = component is not None and component.is_consolidated
            if not leaves_only or not is_consolidated:
                descendants.add(edge.component_name)
            if recursive and is_consolidated:
                descendants |= self.get_descendants(edge.component_name, True, leaves_only)
        return descendants

    def add_element_attribute(self, name: str, attribute_type: Union[str, ElementAttribute.Types]):
        attribute = ElementAttribute(name, attribute_type)
        if attribute not in self._element_attributes:
            self._element_attributes.append(attribute)

    def remove_element_attribute(self, name: str):
        self._element_attributes = [
            element_attribute
            for element_attribute
            in self._element_attributes if not case_and_space_insensitive_equals(element_attribute.name, name)]

    def add_subset(self, subset: Subset):
        if self.contains_subset(subset.name):
            raise ValueError("Subset: {} already exists in hierarchy: {}".format(subset.name, self.name))
        subset.dimension_name = self._dimension_name
        subset.hierarchy_name = self._name
        self._subsets.append(subset)

    def contains_subset(self, subset_name: str) -> bool:
        return any(case_and_space_insensitive_equals(subset.name, subset_name) for subset in self._subsets)

    def get_subset(self, subset_name: str) -> Subset:
        for subset in self._subsets:
            if case_and_space_insensitive_equals(subset.name, subset_name):
                return subset
        raise ValueError("Subset: {} not found in hierarchy: {}".format(subset_name, self.name))

    def remove_subset(self, subset_name: str):
        self._subsets = [
            subset
            for subset
            in self._subsets
            if not case_and_space_insensitive_equals(subset.name, subset_name)]

    @property
    def body_as_dict(self) -> Dict:
        return self.construct_body_as_dict()

    def construct_body_as_dict(self, element_attributes: bool = False) -> Dict:
        """
        Element Attributes are created separately in most cases, as TM1 10.2.2 couldn't create
        hierarchy and element attributes in one request. Subsets are always created separately.

        :param element_attributes: Only include element_attributes in body if explicitly asked for
        :return:
        """
        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._name
        body_as_dict['Elements'] = [element.body_as_dict for element in self._elements.values()]
        body_as_dict['Edges'] = [edge.body_as_dict for edge in self._edges]
        if element_attributes:
            body_as_dict['ElementAttributes'] = [element_attribute.body_as_dict
                                                 for element_attribute
                                                 in self._element_attributes]
        return body_as_dict

    def __iter__(self):
        return iter(self._elements.values())

    def __len__(self):
        return len(self._elements)

    def __contains__(self, item):
        return self.contains_element(item)

    def __getitem__(self, item):
        return self.get_element(item)
