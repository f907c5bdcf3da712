# ruff: noqa: F401
from TM1model.Objects.Axis import SelectedElement, ViewAxisSelection, ViewTitleSelection
from TM1model.Objects.Batch import BatchRequest, BatchRequests, BatchResponse, BatchResponses
from TM1model.Objects.Chore import Chore
from TM1model.Objects.ChoreFrequency import ChoreFrequency
from TM1model.Objects.ChoreStartTime import ChoreStartTime
from TM1model.Objects.ChoreTask import ChoreTask
from TM1model.Objects.Content import Content, extract_names_from_contents
from TM1model.Objects.Cube import Cube
from TM1model.Objects.Dimension import Dimension
from TM1model.Objects.Edge import Edge
from TM1model.Objects.Element import Element
from TM1model.Objects.ElementAttribute import ElementAttribute
from TM1model.Objects.Hierarchy import Hierarchy
from TM1model.Objects.MDXView import MDXView
from TM1model.Objects.NativeView import NativeView
from TM1model.Objects.Process import Process, ProcessDataSource
from TM1model.Objects.ProcessDebugBreakpoint import (
    BreakPointType,
    HitMode,
    ProcessDebugBreakpoint,
)
from TM1model.Objects.Subset import Subset
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Objects.User import User, UserType, is_admin, is_security_admin
from TM1model.Objects.View import MDX_VIEW_TYPE, NATIVE_VIEW_TYPE, View, view_from_dict, view_from_json
