# -*- coding: utf-8 -*-

import collections
import datetime
from typing import Dict, Iterable, List, Optional

from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, expect_list, load_json, parse_odata_timestamp

FOLDER_TYPE = "#ibm.tm1.api.v1.Folder"


class Content(TM1Object):
    """ Abstraction of a file or folder in the TM1 file system (/Contents)

        Folders own an ordered list of nested contents, files don't.
    """

    def __init__(self, name: str, content_id: str = None, odata_type: str = None, size: int = 0,
                 last_updated: str = None, media_content_type: str = None, contents: Iterable['Content'] = None):
        self._name = name
        self._id = content_id
        self._odata_type = odata_type
        self._size = size
        self._last_updated = last_updated
        self._media_content_type = media_content_type
        self._contents = list(contents) if contents else []

    @classmethod
    def from_json(cls, content_as_json: str) -> 'Content':
        return cls.from_dict(load_json(content_as_json, "Content"))

    @classmethod
    def from_dict(cls, content_as_dict: Dict) -> 'Content':
        content_as_dict = expect_dict(content_as_dict, "Content")
        return cls(
            name=content_as_dict.get('Name') or '',
            content_id=content_as_dict.get('ID'),
            odata_type=content_as_dict.get('@odata.type'),
            size=content_as_dict.get('Size', 0),
            last_updated=content_as_dict.get('LastUpdated'),
            media_content_type=content_as_dict.get('Content@odata.mediaContentType'),
            contents=[cls.from_dict(content)
                      for content in expect_list(content_as_dict.get('Contents'), "Content")])

    @property
    def name(self) -> str:
        return self._name

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def odata_type(self) -> Optional[str]:
        return self._odata_type

    @property
    def size(self) -> int:
        return self._size

    @property
    def last_updated(self) -> Optional[str]:
        return self._last_updated

    @property
    def last_updated_datetime(self) -> Optional[datetime.datetime]:
        return parse_odata_timestamp(self._last_updated)

    @property
    def media_content_type(self) -> Optional[str]:
        return self._media_content_type

    @property
    def contents(self) -> List['Content']:
        return self._contents

    @property
    def is_folder(self) -> bool:
        return self._odata_type == FOLDER_TYPE or bool(self._contents)

    def add_content(self, content: 'Content'):
        self._contents.append(content)

    def extract_names(self, parent_path: str = "") -> List[str]:
        """ flatten the tree to slash separated paths, depth first

        :param parent_path: path of the parent. Empty for the root
        :return: e.g. ['A', 'A/B', 'A/B/D', 'A/C']
        """
        path = parent_path + "/" + self._name if parent_path else self._name
        return [path] + extract_names_from_contents(self._contents, path)

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        if self._odata_type:
            body_as_dict['@odata.type'] = self._odata_type
        if self._id:
            body_as_dict['ID'] = self._id
        body_as_dict['Name'] = self._name
        if self._size:
            body_as_dict['Size'] = self._size
        if self._last_updated:
            body_as_dict['LastUpdated'] = self._last_updated
        if self._media_content_type:
            body_as_dict['Content@odata.mediaContentType'] = self._media_content_type
        if self._contents:
            body_as_dict['Contents'] = [content.body_as_dict for content in self._contents]
        return body_as_dict


def extract_names_from_contents(contents: Iterable[Content], parent_path: str = "") -> List[str]:
    names = []
    for content in contents:
        names.extend(content.extract_names(parent_path))
    return names
