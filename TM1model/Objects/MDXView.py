# -*- coding: utf-8 -*-

import collections
import re
from typing import Dict, Optional

from TM1model.Objects.View import MDX_VIEW_TYPE, View
from TM1model.Utils import case_and_space_insensitive_equals, expect_dict


class MDXView(View):
    """ Abstraction on TM1 MDX view

        IMPORTANT. MDXViews can't be seen through the old TM1 clients (Architect, Perspectives). They do exist though!

        meta holds three mappings, written as they are:
            Aliases: {'[dim].[hier]': 'alias'}
            ContextSets: {'[dim].[hier]': {...}}
            ExpandAboves: {'[dim].[hier]': True}
    """

    ODATA_TYPE = MDX_VIEW_TYPE
    META_KEYS = ('Aliases', 'ContextSets', 'ExpandAboves')

    def __init__(self, cube_name: Optional[str], view_name: str, MDX: str, meta: Dict = None,
                 odata_type: str = None):
        super().__init__(cube_name, view_name, odata_type)
        self._mdx = MDX
        self._meta = collections.OrderedDict((key, dict((meta or {}).get(key) or {})) for key in self.META_KEYS)

    @property
    def mdx(self) -> str:
        return self._mdx

    @mdx.setter
    def mdx(self, value: str):
        self._mdx = value

    @property
    def MDX(self) -> str:
        return self._mdx

    @MDX.setter
    def MDX(self, value: str):
        self._mdx = value

    @property
    def meta(self) -> Dict:
        return self._meta

    @property
    def context_sets(self) -> Dict[str, Dict[str, str]]:
        return self._meta['ContextSets']

    @property
    def expand_aboves(self) -> Dict[str, bool]:
        return self._meta['ExpandAboves']

    @property
    def aliases(self) -> Dict[str, str]:
        """ Returns a dictionary with aliases for dimensions in the MDX view
        meta['Aliases'] =  {
            '[Account].[Account]': 'Description',
            '[Cost Center].[Cost Center]': 'Full Name',
        }
        return:
            {
                'Account': 'Description',
                'Cost Center': 'Full Name'
            }
        """
        dimension_hierarchy_pattern = re.compile(r'\[(?P<dimension>[^\]]+)\]\.\[(?P<hierarchy>[^\]]+)\]')
        alias_pool = {}
        for dimension_hierarchy, alias in self._meta['Aliases'].items():
            pattern_matches = dimension_hierarchy_pattern.search(dimension_hierarchy)
            if not pattern_matches:
                continue
            alias_pool[pattern_matches.group('dimension')] = alias
        return alias_pool

    def substitute_title(self, dimension: str, hierarchy: str, element: str):
        """ dimension and hierarchy name are space sensitive!

        :param dimension:
        :param hierarchy:
        :param element:
        :return:
        """
        pattern = re.compile(
            r"\[" + re.escape(dimension) + r"\]\.\[" + re.escape(hierarchy or dimension) + r"\]\.\[(.*?)\]",
            re.IGNORECASE)
        if pattern.search(self._mdx):
            self._mdx = pattern.sub(
                lambda _: f"[{dimension}].[{hierarchy or dimension}].[{element}]", self._mdx)
            return

        if hierarchy is None or case_and_space_insensitive_equals(dimension, hierarchy):
            pattern = re.compile(r"\[" + re.escape(dimension) + r"\]\.\[(.*?)\]", re.IGNORECASE)
            if pattern.search(self._mdx):
                self._mdx = pattern.sub(lambda _: f"[{dimension}].[{element}]", self._mdx)
                return

        raise ValueError(f"No selection in title with dimension: '{dimension}' and hierarchy: '{hierarchy}'")

    @classmethod
    def from_dict(cls, view_as_dict: Dict, cube_name: str = None) -> 'MDXView':
        view_as_dict = expect_dict(view_as_dict, "MDXView")
        meta = expect_dict(view_as_dict.get('Meta') or {}, "MDXView")
        return cls(cube_name=cls.cube_name_from_dict(view_as_dict, cube_name),
                   view_name=view_as_dict.get('Name') or '',
                   MDX=view_as_dict.get('MDX') or '',
                   meta={key: expect_dict(meta.get(key) or {}, "MDXView") for key in cls.META_KEYS},
                   odata_type=view_as_dict.get('@odata.type'))

    def construct_body_as_dict(self, static: bool = True) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['@odata.type'] = self.odata_type
        body_as_dict['Name'] = self._name
        body_as_dict['MDX'] = self._mdx
        body_as_dict['Meta'] = self._meta
        return body_as_dict
