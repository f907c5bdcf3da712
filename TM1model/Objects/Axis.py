# -*- coding: utf-8 -*-

import collections
import logging
import re
from typing import Dict, Optional, Union
from urllib.parse import unquote

from TM1model.Exceptions import TM1modelMissingBindingException
from TM1model.Objects.Subset import Subset
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import element_reference, expect_dict, name_of

logger = logging.getLogger(__name__)

SUBSET_BINDING_PATTERN = re.compile(r"^Dimensions\('(.*)'\)/Hierarchies\('(.*)'\)/Subsets\('(.*)'\)$")


def subset_from_axis_dict(axis_as_dict: Dict) -> Subset:
    """ decode the subset of an axis: expanded Subset or a reference to a registered subset
    """
    binding = axis_as_dict.get('Subset@odata.bind')
    if not axis_as_dict.get('Subset') and isinstance(binding, str):
        match = SUBSET_BINDING_PATTERN.match(binding)
        if match:
            dimension_name, hierarchy_name, subset_name = (unquote(name) for name in match.groups())
            logger.debug("Read registered subset '%s' from axis binding", subset_name)
            return Subset(subset_name, dimension_name, hierarchy_name)
    return Subset.from_dict(axis_as_dict.get('Subset') or {})


class SelectedElement(TM1Object):
    """ Element selected on a title axis of a NativeView

    dimension_name and hierarchy_name are back-pointers. They are never written as fields
    but are required to build the Selected@odata.bind reference.
    """

    def __init__(self, name: str, dimension_name: str = None, hierarchy_name: str = None):
        self._name = name
        self._dimension_name = dimension_name
        self._hierarchy_name = hierarchy_name if hierarchy_name else dimension_name

    @classmethod
    def from_dict(cls, selected_as_dict: Dict) -> 'SelectedElement':
        selected_as_dict = expect_dict(selected_as_dict, "SelectedElement")
        hierarchy = selected_as_dict.get('Hierarchy')
        hierarchy_name, dimension_name = None, None
        if isinstance(hierarchy, dict):
            hierarchy_name = name_of(hierarchy)
            dimension_name = name_of(hierarchy.get('Dimension'))
        if not hierarchy_name and dimension_name:
            logger.debug("Defaulted hierarchy of selected element '%s' to dimension '%s'",
                         selected_as_dict.get('Name'), dimension_name)
        return cls(
            name=selected_as_dict.get('Name') or "",
            dimension_name=dimension_name,
            hierarchy_name=hierarchy_name)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def dimension_name(self) -> Optional[str]:
        return self._dimension_name

    @dimension_name.setter
    def dimension_name(self, value: str):
        self._dimension_name = value

    @property
    def hierarchy_name(self) -> Optional[str]:
        return self._hierarchy_name

    @hierarchy_name.setter
    def hierarchy_name(self, value: str):
        self._hierarchy_name = value

    @property
    def reference(self) -> str:
        return element_reference(self._dimension_name, self._hierarchy_name, self._name)

    @property
    def body_as_dict(self) -> Dict:
        return {'Selected@odata.bind': self.reference}


class ViewAxisSelection(TM1Object):
    """ Describes what is selected in a dimension on the column or row axis of a NativeView

    """

    def __init__(self, subset: Subset, dimension_name: str = None):
        """
        :param subset: instance of TM1model.Subset
        :param dimension_name: defaults to the dimension of the subset
        """
        self._subset = subset
        self._dimension_name = dimension_name

    @classmethod
    def from_dict(cls, axis_as_dict: Dict) -> 'ViewAxisSelection':
        axis_as_dict = expect_dict(axis_as_dict, "ViewAxisSelection")
        return cls(subset=subset_from_axis_dict(axis_as_dict))

    @property
    def subset(self) -> Optional[Subset]:
        return self._subset

    @subset.setter
    def subset(self, value: Subset):
        self._subset = value

    @property
    def dimension_name(self) -> Optional[str]:
        if self._dimension_name:
            return self._dimension_name
        if self._subset is not None:
            return self._subset.dimension_name
        return None

    @property
    def hierarchy_name(self) -> Optional[str]:
        if self._subset is not None and self._subset.hierarchy_name:
            return self._subset.hierarchy_name
        return self.dimension_name

    def _subset_body_as_dict(self, static: bool) -> Dict:
        if self._subset is None:
            raise TM1modelMissingBindingException("subset", "Axis '{}'".format(self.dimension_name or ""))
        return self._subset.view_body_as_dict(static)

    def construct_body_as_dict(self, static: bool = True) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['Subset'] = self._subset_body_as_dict(static)
        return body_as_dict

    @property
    def body_as_dict(self) -> Dict:
        return self.construct_body_as_dict()


class ViewTitleSelection(ViewAxisSelection):
    """ Describes what is selected in a dimension on the title axis of a NativeView:
        a subset and (optionally) one selected element

    """

    def __init__(self, subset: Subset, selected: Union[str, SelectedElement] = None, dimension_name: str = None):
        """
        :param subset: instance of TM1model.Subset
        :param selected: element name or SelectedElement. An element name is bound to the hierarchy of the subset
        :param dimension_name: defaults to the dimension of the subset
        """
        super().__init__(subset=subset, dimension_name=dimension_name)
        self._selected = None
        self.selected = selected

    @classmethod
    def from_dict(cls, title_as_dict: Dict) -> 'ViewTitleSelection':
        title_as_dict = expect_dict(title_as_dict, "ViewTitleSelection")
        selected = title_as_dict.get('Selected')
        return cls(
            subset=subset_from_axis_dict(title_as_dict),
            selected=SelectedElement.from_dict(selected) if selected else None)

    @property
    def selected(self) -> Optional[SelectedElement]:
        return self._selected

    @selected.setter
    def selected(self, value: Union[str, SelectedElement]):
        if isinstance(value, str):
            self._selected = SelectedElement(name=value)
            self.stamp_selected()
        else:
            self._selected = value

    def stamp_selected(self):
        """ fill missing back-pointers of the selected element from the subset of this title
        """
        if self._selected is None or self._subset is None:
            return
        if not self._selected.dimension_name:
            self._selected.dimension_name = self._subset.dimension_name
        if not self._selected.hierarchy_name:
            self._selected.hierarchy_name = self._subset.hierarchy_name or self._selected.dimension_name

    @property
    def selected_name(self) -> Optional[str]:
        if self._selected is None:
            return None
        return self._selected.name

    def construct_body_as_dict(self, static: bool = True) -> Dict:
        body_as_dict = super().construct_body_as_dict(static)
        if self._selected is not None and self._selected.name:
            for field in ("dimension_name", "hierarchy_name"):
                if not getattr(self._selected, field):
                    raise TM1modelMissingBindingException(field, "Selected element '{}'".format(self._selected.name))
            body_as_dict['Selected@odata.bind'] = self._selected.reference
        return body_as_dict
