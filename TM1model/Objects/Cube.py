# -*- coding: utf-8 -*-

import collections
import datetime
import re
from typing import Dict, Iterable, List, Optional

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.Dimension import Dimension
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Objects.View import View
from TM1model.Utils import dimension_reference, expect_dict, expect_list, load_json, parse_odata_timestamp


class Cube(TM1Object):
    """Abstraction of a TM1 Cube

    The dimensions of a cube are an ordered list of dimension names. Names can be given explicitly
    (dimension_names) and through owned Dimension objects (dimensions).
    """

    def __init__(
        self,
        name: str,
        dimension_names: Optional[Iterable[str]] = None,
        rules: Optional[str] = None,
        drillthrough_rules: Optional[str] = None,
        dimensions: Optional[Iterable[Dimension]] = None,
        views: Optional[Iterable[View]] = None,
        private_views: Optional[Iterable[View]] = None,
        last_schema_update: Optional[datetime.datetime] = None,
        last_data_update: Optional[datetime.datetime] = None,
    ):
        """

        :param name: name of the Cube
        :param dimension_names: list of (existing) dimension names
        :param rules: rule statements as string
        :param drillthrough_rules: drillthrough rule statements as string
        :param dimensions: list of TM1model.Objects.Dimension instances
        :param views: public views of the cube
        :param private_views: private views of the cube
        """
        self._name = name
        self._dimension_names = list(dimension_names) if dimension_names else []
        self._dimensions = list(dimensions) if dimensions else []
        self.rules = rules
        self.drillthrough_rules = drillthrough_rules
        self._views = []
        self._private_views = []
        for view in views or []:
            self.add_view(view)
        for view in private_views or []:
            self.add_view(view, private=True)
        self._last_schema_update = last_schema_update
        self._last_data_update = last_data_update

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value
        for view in self._views + self._private_views:
            view.cube = value

    @property
    def dimension_names(self) -> List[str]:
        return self._dimension_names

    @dimension_names.setter
    def dimension_names(self, value: Iterable[str]):
        self._dimension_names = list(value)

    @property
    def dimensions(self) -> List[Dimension]:
        return self._dimensions

    @property
    def rules(self) -> Optional[str]:
        return self._rules

    @rules.setter
    def rules(self, value: Optional[str]):
        if value is not None and not isinstance(value, str):
            raise ValueError("value must be None or of type str")
        self._rules = value

    @property
    def drillthrough_rules(self) -> Optional[str]:
        return self._drillthrough_rules

    @drillthrough_rules.setter
    def drillthrough_rules(self, value: Optional[str]):
        self._drillthrough_rules = value

    @property
    def views(self) -> List[View]:
        return self._views

    @property
    def private_views(self) -> List[View]:
        return self._private_views

    @property
    def last_schema_update(self) -> Optional[datetime.datetime]:
        return self._last_schema_update

    @property
    def last_data_update(self) -> Optional[datetime.datetime]:
        return self._last_data_update

    @property
    def has_rules(self) -> bool:
        return bool(self._rules and self._rules.strip())

    @property
    def skipcheck(self) -> bool:
        return self._has_rule_statement("SKIPCHECK")

    @property
    def feedstrings(self) -> bool:
        return self._has_rule_statement("FEEDSTRINGS")

    @property
    def undefvals(self) -> bool:
        return self._has_rule_statement("UNDEFVALS")

    def _has_rule_statement(self, statement: str) -> bool:
        if not self.has_rules:
            return False
        # statements must stand on a line of their own, lines starting with # are comments
        pattern = re.compile(r"^\s*" + statement + r"\s*;", re.IGNORECASE | re.MULTILINE)
        return bool(pattern.search(self._rules))

    def add_dimension(self, dimension: Dimension):
        self._dimensions.append(dimension)

    def add_dimension_name(self, dimension_name: str):
        self._dimension_names.append(dimension_name)

    def add_view(self, view: View, private: bool = False):
        view.cube = self._name
        if private:
            self._private_views.append(view)
        else:
            self._views.append(view)

    def dimension_names_resolved(self) -> List[str]:
        """ explicit dimension names first, then names of the owned dimensions.
        Empty names are dropped, duplicates removed (first occurrence wins)

        :return: list of dimension names in cube order
        """
        resolved = []
        for dimension_name in self._dimension_names + [dimension.name for dimension in self._dimensions]:
            if not dimension_name or dimension_name in resolved:
                continue
            resolved.append(dimension_name)
        return resolved

    @classmethod
    def from_json(cls, cube_as_json: str) -> "Cube":
        """Alternative constructor

        :param cube_as_json: cube as JSON string
        :return: cube, an instance of this class
        """
        return cls.from_dict(load_json(cube_as_json, "Cube"))

    @classmethod
    def from_dict(cls, cube_as_dict: Dict) -> "Cube":
        """Alternative constructor

        Dimensions, Views and PrivateViews are decoded when expanded.
        Views are decoded through their @odata.type discriminator

        :param cube_as_dict: cube as dict, e.g. response of /Cubes('x')?$expand=Dimensions,Views
        :return: cube, an instance of this class
        """
        cube_as_dict = expect_dict(cube_as_dict, "Cube")
        name = cube_as_dict.get("Name") or ""
        dimensions = [Dimension.from_dict(dimension)
                      for dimension in expect_list(cube_as_dict.get("Dimensions"), "Cube")]
        views = [View.from_dict(view, cube_name=name)
                 for view in expect_list(cube_as_dict.get("Views"), "Cube")]
        private_views = [View.from_dict(view, cube_name=name)
                         for view in expect_list(cube_as_dict.get("PrivateViews"), "Cube")]
        try:
            return cls(
                name=name,
                dimensions=dimensions,
                rules=cube_as_dict.get("Rules") or None,
                drillthrough_rules=cube_as_dict.get("DrillthroughRules") or None,
                views=views,
                private_views=private_views,
                last_schema_update=parse_odata_timestamp(cube_as_dict.get("LastSchemaUpdate")),
                last_data_update=parse_odata_timestamp(cube_as_dict.get("LastDataUpdate")),
            )
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "Cube") from e

    @property
    def body_as_dict(self) -> Dict:
        """
        construct body from the class attributes. @odata annotations of a response are never echoed
        :return: Dict, TM1 JSON representation of a cube
        """
        body_as_dict = collections.OrderedDict()
        body_as_dict["Name"] = self._name
        dimension_names = self.dimension_names_resolved()
        if dimension_names:
            body_as_dict["Dimensions@odata.bind"] = [
                dimension_reference(dimension_name) for dimension_name in dimension_names
            ]
        if self._rules:
            body_as_dict["Rules"] = self._rules
        if self._drillthrough_rules:
            body_as_dict["DrillthroughRules"] = self._drillthrough_rules
        return body_as_dict
