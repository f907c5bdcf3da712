# -*- coding: utf-8 -*-
from abc import abstractmethod
from typing import Dict, Optional

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import dump_body, expect_dict, load_json, name_of

NATIVE_VIEW_TYPE = "#ibm.tm1.api.v1.NativeView"
MDX_VIEW_TYPE = "#ibm.tm1.api.v1.MDXView"


class View(TM1Object):
    """Abstraction of TM1 View
    serves as a parentclass for TM1model.Objects.MDXView and TM1model.Objects.NativeView

    View.from_dict / View.from_json decode either of the two, based on the @odata.type of the payload.
    """

    ODATA_TYPE = None

    def __init__(self, cube: Optional[str], name: str, odata_type: str = None):
        self._cube = cube
        self._name = name
        self._odata_type = odata_type

    @property
    def cube(self) -> Optional[str]:
        return self._cube

    @cube.setter
    def cube(self, value: str):
        self._cube = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def odata_type(self) -> str:
        return self._odata_type or self.ODATA_TYPE

    @odata_type.setter
    def odata_type(self, value: str):
        self._odata_type = value

    @property
    def mdx(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def construct_body_as_dict(self, static: bool = True) -> Dict:
        pass

    def construct_body(self, static: bool = True) -> str:
        return dump_body(self.construct_body_as_dict(static))

    @property
    def body_as_dict(self) -> Dict:
        return self.construct_body_as_dict()

    @staticmethod
    def cube_name_from_dict(view_as_dict: Dict, cube_name: str = None) -> Optional[str]:
        if cube_name:
            return cube_name
        return name_of(view_as_dict.get("Cube"))

    @classmethod
    def from_json(cls, view_as_json: str, cube_name: str = None) -> 'View':
        return cls.from_dict(load_json(view_as_json, "View"), cube_name=cube_name)

    @classmethod
    def from_dict(cls, view_as_dict: Dict, cube_name: str = None) -> 'View':
        """ Alternative constructor. Reads the @odata.type and decodes the payload as NativeView or MDXView

        :param view_as_dict: view as dict, as returned by TM1
        :param cube_name: name of the parent cube. Read from an expanded Cube if not provided
        :return: instance of TM1model.NativeView or TM1model.MDXView
        """
        from TM1model.Objects.MDXView import MDXView
        from TM1model.Objects.NativeView import NativeView

        view_as_dict = expect_dict(view_as_dict, "View")
        odata_type = view_as_dict.get("@odata.type")
        if odata_type == NATIVE_VIEW_TYPE:
            return NativeView.from_dict(view_as_dict, cube_name=cube_name)
        if odata_type == MDX_VIEW_TYPE:
            return MDXView.from_dict(view_as_dict, cube_name=cube_name)
        raise TM1modelDecodeException("unknown view type: '{}'".format(odata_type), "View")


def view_from_dict(view_as_dict: Dict, cube_name: str = None) -> View:
    return View.from_dict(view_as_dict, cube_name=cube_name)


def view_from_json(view_as_json: str, cube_name: str = None) -> View:
    return View.from_json(view_as_json, cube_name=cube_name)
