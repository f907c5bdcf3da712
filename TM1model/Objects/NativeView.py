# -*- coding: utf-8 -*-

import collections
from typing import Dict, Iterable, List, Optional, Union

from mdxpy import MdxBuilder, MdxHierarchySet, Member

from TM1model.Objects.Axis import SelectedElement, ViewAxisSelection, ViewTitleSelection
from TM1model.Objects.Subset import Subset
from TM1model.Objects.View import NATIVE_VIEW_TYPE, View
from TM1model.Utils import case_and_space_insensitive_equals, expect_dict, expect_list


class NativeView(View):
    """ Abstraction of TM1 NativeView (classic cube view)

        Columns and rows are lists of ViewAxisSelection, titles a list of ViewTitleSelection.
        Every axis carries exactly one subset.
    """

    ODATA_TYPE = NATIVE_VIEW_TYPE

    def __init__(self,
                 cube_name: Optional[str],
                 view_name: str,
                 suppress_empty_columns: Optional[bool] = False,
                 suppress_empty_rows: Optional[bool] = False,
                 format_string: Optional[str] = None,
                 titles: Optional[Iterable[ViewTitleSelection]] = None,
                 columns: Optional[Iterable[ViewAxisSelection]] = None,
                 rows: Optional[Iterable[ViewAxisSelection]] = None,
                 odata_type: Optional[str] = None):
        super().__init__(cube_name, view_name, odata_type)
        self._suppress_empty_columns = suppress_empty_columns
        self._suppress_empty_rows = suppress_empty_rows
        self._format_string = format_string
        self._titles = list(titles) if titles else []
        self._columns = list(columns) if columns else []
        self._rows = list(rows) if rows else []

    @property
    def rows(self) -> List[ViewAxisSelection]:
        return self._rows

    @property
    def columns(self) -> List[ViewAxisSelection]:
        return self._columns

    @property
    def titles(self) -> List[ViewTitleSelection]:
        return self._titles

    @property
    def mdx(self) -> str:
        """ Build a valid MDX Query from the native view.
        Takes Zero suppression into account.
        Raises ValueError when nothing is placed on the columns.
        Named static subsets are referenced through TM1SubsetToSet, dynamic subsets through their expression.

        :return: String, the MDX Query
        """
        if not self._columns:
            raise ValueError("Column selection must not be empty")

        query = MdxBuilder.from_cube(self.cube)
        if self._suppress_empty_rows:
            query.rows_non_empty()

        if self._suppress_empty_columns:
            query.columns_non_empty()

        axes = [self._columns]
        if self._rows:
            axes.append(self._rows)

        for axis_id, axis in enumerate(axes):
            for axis_selection in axis:
                query.add_hierarchy_set_to_axis(
                    axis=axis_id,
                    mdx_hierarchy_set=self._hierarchy_set(axis_selection.subset))

        for title in self._titles:
            if not title.selected_name:
                continue
            query.add_member_to_where(
                Member.of(title.dimension_name, title.hierarchy_name, title.selected_name))

        return query.to_mdx()

    @staticmethod
    def _hierarchy_set(subset: Subset) -> MdxHierarchySet:
        if subset.is_dynamic:
            return MdxHierarchySet.from_str(
                dimension=subset.dimension_name,
                hierarchy=subset.hierarchy_name,
                mdx=subset.expression)
        if subset.name:
            return MdxHierarchySet.tm1_subset_to_set(
                dimension=subset.dimension_name,
                hierarchy=subset.hierarchy_name,
                subset=subset.name)
        return MdxHierarchySet.members([
            Member.of(subset.dimension_name, subset.hierarchy_name, element)
            for element
            in subset.elements])

    @property
    def suppress_empty_cells(self) -> bool:
        return self._suppress_empty_columns and self._suppress_empty_rows

    @suppress_empty_cells.setter
    def suppress_empty_cells(self, value: bool):
        self.suppress_empty_columns = value
        self.suppress_empty_rows = value

    @property
    def suppress_empty_columns(self) -> bool:
        return self._suppress_empty_columns

    @suppress_empty_columns.setter
    def suppress_empty_columns(self, value: bool):
        self._suppress_empty_columns = value

    @property
    def suppress_empty_rows(self) -> bool:
        return self._suppress_empty_rows

    @suppress_empty_rows.setter
    def suppress_empty_rows(self, value: bool):
        self._suppress_empty_rows = value

    @property
    def format_string(self) -> Optional[str]:
        return self._format_string

    @format_string.setter
    def format_string(self, value: str):
        self._format_string = value

    def add_column(self, subset: Subset):
        """ Add a subset to the column-axis

        :param subset: instance of TM1model.Subset
        """
        self._columns.append(ViewAxisSelection(subset=subset))

    def remove_column(self, dimension_name: str):
        """ remove dimension from the column axis

        :param dimension_name:
        """
        self._columns = self._remove_dimension(self._columns, dimension_name)

    def add_row(self, subset: Subset):
        """ Add a subset to the row-axis

        :param subset: instance of TM1model.Subset
        """
        self._rows.append(ViewAxisSelection(subset=subset))

    def remove_row(self, dimension_name: str):
        self._rows = self._remove_dimension(self._rows, dimension_name)

    def add_title(self, subset: Subset, selection: Union[str, SelectedElement] = None):
        """ Add subset and element to the titles-axis

        :param subset: instance of TM1model.Subset
        :param selection: name of an element or SelectedElement
        """
        title = ViewTitleSelection(subset=subset, selected=selection)
        title.stamp_selected()
        self._titles.append(title)

    def remove_title(self, dimension_name: str):
        self._titles = self._remove_dimension(self._titles, dimension_name)

    @staticmethod
    def _remove_dimension(axis: List[ViewAxisSelection], dimension_name: str) -> List[ViewAxisSelection]:
        return [
            selection
            for selection
            in axis
            if selection.dimension_name is None
            or not case_and_space_insensitive_equals(selection.dimension_name, dimension_name)]

    @classmethod
    def from_dict(cls, view_as_dict: Dict, cube_name: str = None) -> 'NativeView':
        """ Alternative constructor

        :param view_as_dict: NativeView as dict, as returned by TM1 with expanded axes
        :param cube_name: name of the parent cube. Read from an expanded Cube if not provided
        :return: an instance of this class
        """
        view_as_dict = expect_dict(view_as_dict, "NativeView")
        return cls(
            cube_name=cls.cube_name_from_dict(view_as_dict, cube_name),
            view_name=view_as_dict.get('Name') or '',
            suppress_empty_columns=view_as_dict.get('SuppressEmptyColumns', False),
            suppress_empty_rows=view_as_dict.get('SuppressEmptyRows', False),
            format_string=view_as_dict.get('FormatString') or None,
            titles=[ViewTitleSelection.from_dict(title)
                    for title in expect_list(view_as_dict.get('Titles'), "NativeView")],
            columns=[ViewAxisSelection.from_dict(column)
                     for column in expect_list(view_as_dict.get('Columns'), "NativeView")],
            rows=[ViewAxisSelection.from_dict(row)
                  for row in expect_list(view_as_dict.get('Rows'), "NativeView")],
            odata_type=view_as_dict.get('@odata.type'))

    def construct_body_as_dict(self, static: bool = True) -> Dict:
        """ construct the ODATA conform representation of the NativeView entity

        :param static: materialize the elements of static subsets.
        If False, subsets are written with their expression only
        :return: dictionary
        """
        body_as_dict = collections.OrderedDict()
        body_as_dict['@odata.type'] = self.odata_type
        body_as_dict['Name'] = self._name
        body_as_dict['Columns'] = [column.construct_body_as_dict(static) for column in self._columns]
        body_as_dict['Rows'] = [row.construct_body_as_dict(static) for row in self._rows]
        if self._titles:
            body_as_dict['Titles'] = [title.construct_body_as_dict(static) for title in self._titles]
        if self._suppress_empty_columns:
            body_as_dict['SuppressEmptyColumns'] = self._suppress_empty_columns
        if self._suppress_empty_rows:
            body_as_dict['SuppressEmptyRows'] = self._suppress_empty_rows
        if self._format_string:
            body_as_dict['FormatString'] = self._format_string
        return body_as_dict
