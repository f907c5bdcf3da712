"""
A python model of the TM1 REST API (OData) entities.

TM1model decodes TM1 responses into concise Python classes and builds OData conform request bodies from them.

Usage:
>>> subset = Subset.static(subset_name='Q1', dimension_name='Month', elements=['Jan', 'Feb', 'Mar'])
>>> subset.body
>>> view = View.from_json(response_text, cube_name='Sales')

"""

import logging

# __init__ can hoist attributes from submodules into higher namespaces for convenience

from TM1model.Exceptions import (
    TM1modelDecodeException,
    TM1modelEncodeException,
    TM1modelException,
    TM1modelInvalidNameException,
    TM1modelMissingBindingException,
)
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
from TM1model.Objects.ProcessDebugBreakpoint import ProcessDebugBreakpoint
from TM1model.Objects.Subset import Subset
from TM1model.Objects.User import User
from TM1model.Objects.View import View, view_from_dict, view_from_json

from TM1model.Utils import Utils

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"
