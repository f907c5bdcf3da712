# -*- coding: utf-8 -*-
import collections
from enum import Enum
from typing import Dict, Union

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, load_json

ODATA_TYPE_PREFIX = "#ibm.tm1.api.v1."


class HitMode(Enum):
    BREAK_ALWAYS = "BreakAlways"
    BREAK_EQUAL = "BreakEqual"
    BREAK_GREATER_OR_EQUAL = "BreakGreaterOrEqual"

    def __str__(self):
        return self.value

    @classmethod
    def _missing_(cls, value: str):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.replace(" ", "").lower():
                    return member

        # default
        raise ValueError(f"Invalid HitMode: '{value}'")


class BreakPointType(Enum):
    # pauses execution when the named variable is written to
    PROCESS_DEBUG_CONTEXT_DATA_BREAK_POINT = "ProcessDebugContextDataBreakpoint"
    # pauses execution at a specific line of a procedure
    PROCESS_DEBUG_CONTEXT_LINE_BREAK_POINT = "ProcessDebugContextLineBreakpoint"
    # pauses execution when an object lock is acquired
    PROCESS_DEBUG_CONTEXT_LOCK_BREAK_POINT = "ProcessDebugContextLockBreakpoint"

    def __str__(self):
        return self.value

    @classmethod
    def _missing_(cls, value: str):
        if isinstance(value, str):
            value = value[len(ODATA_TYPE_PREFIX):] if value.startswith(ODATA_TYPE_PREFIX) else value
            for member in cls:
                if member.value.lower() == value.replace(" ", "").lower():
                    return member

        # default
        raise ValueError(f"Invalid BreakPointType: '{value}'")


class ProcessDebugBreakpoint(TM1Object):
    """Abstraction of a TM1 Process Debug Breakpoint.

    body is the request body of /ProcessDebugContexts('id')/Breakpoints,
    body_as_dict the same content as a mapping, for use inside batch requests.
    """

    def __init__(
        self,
        breakpoint_id: int = 0,
        breakpoint_type: Union[BreakPointType, str] = BreakPointType.PROCESS_DEBUG_CONTEXT_LINE_BREAK_POINT,
        enabled: bool = True,
        hit_mode: Union[HitMode, str] = HitMode.BREAK_ALWAYS,
        hit_count: int = 0,
        expression: str = "",
        variable_name: str = "",
        procedure_type: str = "",
        line_number: int = 0,
        object_name: str = "",
        object_type: str = "",
        lock_mode: str = "",
    ):
        self._type = BreakPointType(breakpoint_type)
        self._id = breakpoint_id
        self._enabled = enabled
        self._hit_mode = HitMode(hit_mode)
        self._hit_count = hit_count
        self._expression = expression
        self._variable_name = variable_name
        self._procedure_type = procedure_type
        self._line_number = line_number
        self._object_name = object_name
        self._object_type = object_type
        self._lock_mode = lock_mode

    @classmethod
    def from_json(cls, breakpoint_as_json: str) -> "ProcessDebugBreakpoint":
        return cls.from_dict(load_json(breakpoint_as_json, "ProcessDebugBreakpoint"))

    @classmethod
    def from_dict(cls, breakpoint_as_dict: Dict) -> "ProcessDebugBreakpoint":
        """
        :param breakpoint_as_dict:
        :return: an instance of this class
        """
        breakpoint_as_dict = expect_dict(breakpoint_as_dict, "ProcessDebugBreakpoint")
        try:
            return cls(
                breakpoint_type=breakpoint_as_dict.get("@odata.type", ""),
                breakpoint_id=breakpoint_as_dict.get("ID", 0),
                enabled=breakpoint_as_dict.get("Enabled", False),
                hit_mode=breakpoint_as_dict.get("HitMode") or HitMode.BREAK_ALWAYS,
                hit_count=breakpoint_as_dict.get("HitCount", 0),
                expression=breakpoint_as_dict.get("Expression", ""),
                variable_name=breakpoint_as_dict.get("VariableName", ""),
                procedure_type=breakpoint_as_dict.get("ProcedureType", ""),
                line_number=breakpoint_as_dict.get("LineNumber", 0),
                object_name=breakpoint_as_dict.get("ObjectName", ""),
                object_type=breakpoint_as_dict.get("ObjectType", ""),
                lock_mode=breakpoint_as_dict.get("LockMode", ""))
        except ValueError as e:
            raise TM1modelDecodeException(str(e), "ProcessDebugBreakpoint") from e

    @property
    def breakpoint_type(self) -> str:
        return str(self._type)

    @property
    def breakpoint_id(self) -> int:
        return self._id

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool):
        self._enabled = value

    @property
    def hit_mode(self) -> str:
        return str(self._hit_mode)

    @hit_mode.setter
    def hit_mode(self, value: Union[HitMode, str]):
        self._hit_mode = HitMode(value)

    @property
    def hit_count(self) -> int:
        return self._hit_count

    @property
    def expression(self) -> str:
        return self._expression

    @expression.setter
    def expression(self, value: str):
        self._expression = value

    @property
    def variable_name(self) -> str:
        return self._variable_name

    @variable_name.setter
    def variable_name(self, value: str):
        self._variable_name = value

    @property
    def procedure_type(self) -> str:
        return self._procedure_type

    @procedure_type.setter
    def procedure_type(self, value: str):
        self._procedure_type = value

    @property
    def line_number(self) -> int:
        return self._line_number

    @line_number.setter
    def line_number(self, value: int):
        self._line_number = value

    @property
    def object_name(self) -> str:
        return self._object_name

    @object_name.setter
    def object_name(self, value: str):
        self._object_name = value

    @property
    def object_type(self) -> str:
        return self._object_type

    @object_type.setter
    def object_type(self, value: str):
        self._object_type = value

    @property
    def lock_mode(self) -> str:
        return self._lock_mode

    @lock_mode.setter
    def lock_mode(self, value: str):
        self._lock_mode = value

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict["@odata.type"] = ODATA_TYPE_PREFIX + str(self._type)
        if self._id:
            body_as_dict["ID"] = self._id
        body_as_dict["Enabled"] = self._enabled
        body_as_dict["HitMode"] = str(self._hit_mode)
        if self._expression:
            body_as_dict["Expression"] = self._expression

        if self._type == BreakPointType.PROCESS_DEBUG_CONTEXT_DATA_BREAK_POINT:
            body_as_dict["VariableName"] = self._variable_name

        elif self._type == BreakPointType.PROCESS_DEBUG_CONTEXT_LINE_BREAK_POINT:
            body_as_dict["ProcedureType"] = self._procedure_type
            body_as_dict["LineNumber"] = self._line_number

        elif self._type == BreakPointType.PROCESS_DEBUG_CONTEXT_LOCK_BREAK_POINT:
            body_as_dict["ObjectName"] = self._object_name
            body_as_dict["ObjectType"] = self._object_type
            body_as_dict["LockMode"] = self._lock_mode

        return body_as_dict
