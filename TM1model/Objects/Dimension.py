# -*- coding: utf-8 -*-

import collections
import logging
from typing import Dict, Iterable, List, Optional

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.Hierarchy import Hierarchy
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import case_and_space_insensitive_equals, expect_dict, expect_list, load_json

logger = logging.getLogger(__name__)


class Dimension(TM1Object):
    """Abstraction of TM1 Dimension

    A Dimension is a container for hierarchies.
    Hierarchy names are unique (case and space insensitive) and kept in insertion order.
    """

    def __init__(self, name: str, hierarchies: Optional[Iterable[Hierarchy]] = None):
        """Abstraction of TM1 Dimension

        :param name: Name of the dimension
        :param hierarchies: List of TM1model.Objects.Hierarchy instances
        """
        self._name = name
        self._hierarchies = []
        for hierarchy in hierarchies or []:
            self.add_hierarchy(hierarchy)

    @classmethod
    def from_json(cls, dimension_as_json: str) -> "Dimension":
        dimension_as_dict = load_json(dimension_as_json, "Dimension")
        return cls.from_dict(dimension_as_dict)

    @classmethod
    def from_dict(cls, dimension_as_dict: Dict) -> "Dimension":
        dimension_as_dict = expect_dict(dimension_as_dict, "Dimension")
        hierarchies = [
            Hierarchy.from_dict(hierarchy)
            for hierarchy in expect_list(dimension_as_dict.get("Hierarchies"), "Dimension")
        ]
        try:
            dimension = cls(name=dimension_as_dict.get("Name") or "", hierarchies=hierarchies)
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "Dimension") from e
        # hierarchies in a dimension payload don't carry the dimension name
        logger.debug("Stamped dimension name '%s' on %d hierarchies", dimension.name, len(dimension.hierarchies))
        return dimension

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        for hierarchy in self._hierarchies:
            hierarchy.dimension_name = value
            if hierarchy.name == self._name:
                hierarchy.name = value
        self._name = value

    @property
    def unique_name(self) -> str:
        return "[" + self._name + "]"

    @property
    def hierarchies(self) -> List[Hierarchy]:
        return self._hierarchies

    @property
    def hierarchy_names(self) -> List[str]:
        return [hierarchy.name for hierarchy in self._hierarchies]

    @property
    def default_hierarchy(self) -> Hierarchy:
        return self._hierarchies[0]

    def __iter__(self):
        return iter(self._hierarchies)

    def __len__(self):
        return len(self._hierarchies)

    def __contains__(self, item):
        return self.contains_hierarchy(item)

    def __getitem__(self, item):
        return self.get_hierarchy(item)

    def contains_hierarchy(self, hierarchy_name: str) -> bool:
        for hierarchy in self._hierarchies:
            if case_and_space_insensitive_equals(hierarchy.name, hierarchy_name):
                return True
        return False

    def get_hierarchy(self, hierarchy_name: str) -> Hierarchy:
        for hierarchy in self._hierarchies:
            if case_and_space_insensitive_equals(hierarchy.name, hierarchy_name):
                return hierarchy
        raise ValueError("Hierarchy: {} not found in dimension: {}".format(hierarchy_name, self.name))

    def add_hierarchy(self, hierarchy: Hierarchy):
        if self.contains_hierarchy(hierarchy.name):
            raise ValueError("Hierarchy: {} already exists in dimension: {}".format(hierarchy.name, self.name))
        hierarchy.dimension_name = self._name
        self._hierarchies.append(hierarchy)

    def remove_hierarchy(self, hierarchy_name: str):
        if case_and_space_insensitive_equals(hierarchy_name, "leaves"):
            raise ValueError("'Leaves' hierarchy must not be removed from dimension")

        for num, hierarchy in enumerate(self._hierarchies):
            if case_and_space_insensitive_equals(hierarchy.name, hierarchy_name):
                del self._hierarchies[num]
                return

    @property
    def body_as_dict(self) -> Dict:
        return self.construct_body_as_dict()

    def construct_body_as_dict(self, include_leaves_hierarchy: bool = False) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict["Name"] = self._name
        body_as_dict["Hierarchies"] = [
            hierarchy.body_as_dict
            for hierarchy in self._hierarchies
            if include_leaves_hierarchy or not case_and_space_insensitive_equals(hierarchy.name, "Leaves")
        ]
        return body_as_dict
