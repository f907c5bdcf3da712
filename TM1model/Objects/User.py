# -*- coding: utf-8 -*-

import collections
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import CaseAndSpaceInsensitiveSet, expect_dict, expect_list, format_url, load_json, name_of


class UserType(Enum):
    User = 0
    SecurityAdmin = 1
    DataAdmin = 2
    Admin = 3
    OperationsAdmin = 4

    def __str__(self):
        return self.name

    @classmethod
    def _missing_(cls, value: str):
        if isinstance(value, str):
            for member in cls:
                if member.name.lower() == value.replace(" ", "").lower():
                    return member
        # default
        raise ValueError("Invalid user type: '{}'".format(value))


class User(TM1Object):
    """ Abstraction of a TM1 User

        The password is write-only: it is written to the body when set but never read from TM1.
    """

    def __init__(self, name: str, groups: Iterable[str] = None, friendly_name: Optional[str] = None,
                 password: Optional[str] = None, user_type: Union[UserType, str] = None, enabled: bool = None):
        self._name = name
        self._groups = CaseAndSpaceInsensitiveSet(*(groups or []))
        self._friendly_name = friendly_name
        self._password = password
        self._enabled = enabled
        self._user_type = None
        if user_type is not None:
            self.user_type = user_type

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @property
    def user_type(self) -> Optional[UserType]:
        return self._user_type

    @user_type.setter
    def user_type(self, value: Union[str, UserType]):
        if not isinstance(value, str) and not isinstance(value, UserType):
            raise ValueError("argument 'user_type' must be of type str or UserType")
        self._user_type = UserType(value)

    @property
    def friendly_name(self) -> Optional[str]:
        return self._friendly_name

    @friendly_name.setter
    def friendly_name(self, value: str):
        self._friendly_name = value

    @property
    def password(self) -> Optional[str]:
        return self._password or None

    @password.setter
    def password(self, value: str):
        self._password = value

    @property
    def enabled(self) -> Optional[bool]:
        return self._enabled

    @enabled.setter
    def enabled(self, value: Optional[bool]):
        self._enabled = value

    @property
    def groups(self) -> List[str]:
        return [group for group in self._groups]

    @property
    def group_names(self) -> List[str]:
        return self.groups

    @property
    def is_admin(self) -> bool:
        return self._user_type is UserType.Admin

    @property
    def is_security_admin(self) -> bool:
        return self._user_type in (UserType.SecurityAdmin, UserType.Admin)

    def add_group(self, group_name: str):
        self._groups.add(group_name)

    def remove_group(self, group_name: str):
        self._groups.discard(group_name)

    @classmethod
    def from_json(cls, user_as_json: str) -> 'User':
        """ Alternative constructor

        :param user_as_json: user as JSON string
        :return: user, an instance of this class
        """
        return cls.from_dict(load_json(user_as_json, "User"))

    @classmethod
    def from_dict(cls, user_as_dict: Dict) -> 'User':
        """ Alternative constructor

        :param user_as_dict: user as dict, e.g. response of /Users('x')?$expand=Groups
        :return: user, an instance of this class
        """
        user_as_dict = expect_dict(user_as_dict, "User")
        try:
            return cls(name=user_as_dict.get('Name') or '',
                       friendly_name=user_as_dict.get('FriendlyName'),
                       enabled=user_as_dict.get('Enabled'),
                       user_type=user_as_dict.get('Type'),
                       groups=[name_of(group) or "" for group in expect_list(user_as_dict.get('Groups'), "User")])
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "User") from e

    @property
    def body_as_dict(self) -> Dict:
        """
        construct body from the class attributes
        :return: Dict, TM1 JSON representation of a user
        """
        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._name
        body_as_dict['FriendlyName'] = self._friendly_name or self._name
        if self._enabled is not None:
            body_as_dict['Enabled'] = self._enabled
        if self._user_type is not None:
            body_as_dict['Type'] = str(self._user_type)
        if self.password:
            body_as_dict['Password'] = self._password
        body_as_dict['Groups@odata.bind'] = [format_url("Groups('{}')", group)
                                             for group
                                             in self._groups]
        return body_as_dict


def is_admin(user: Optional[User]) -> bool:
    return user is not None and user.is_admin


def is_security_admin(user: Optional[User]) -> bool:
    return user is not None and user.is_security_admin
