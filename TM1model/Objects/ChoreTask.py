# -*- coding: utf-8 -*-

import collections
from typing import Dict, Iterable, List

from TM1model.Exceptions import TM1modelDecodeException
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, expect_list, format_url, name_of, read_object_name_from_url

PROCESS_BINDING_PATTERN = r"^Processes\('(.*)'\)$"


class ChoreTask(TM1Object):
    """ Abstraction of a Chore Task

        A Chore task always consists of
        - The step integer ID: it's order in the execution plan.
          0 to n-1, where n is the number of processes in the Chore
        - The name of the process to execute
        - The parameters for the process
    """

    def __init__(self, step: int, process_name: str, parameters: Iterable[Dict] = None):
        """

        :param step: step in the execution order of the Chores' processes
        :param process_name: name of the process
        :param parameters: list of dictionaries with 'Name' and 'Value' property
        """
        self._step = step
        self._process_name = process_name
        self._parameters = list(parameters) if parameters else []

    @classmethod
    def from_dict(cls, chore_task_as_dict: Dict, step: int = None) -> 'ChoreTask':
        """ process name is read from the expanded Process or, in request shape, from Process@odata.bind

        """
        chore_task_as_dict = expect_dict(chore_task_as_dict, "ChoreTask")
        process_name = name_of(chore_task_as_dict.get('Process'))
        if not process_name:
            binding = chore_task_as_dict.get('Process@odata.bind') or ""
            process_name = read_object_name_from_url(binding, PROCESS_BINDING_PATTERN) or binding

        parameters = []
        for parameter in expect_list(chore_task_as_dict.get('Parameters'), "ChoreTask"):
            parameter = expect_dict(parameter, "ChoreTask")
            parameters.append({'Name': parameter.get('Name'), 'Value': parameter.get('Value')})

        if step is None:
            try:
                step = int(chore_task_as_dict.get('Step') or 0)
            except (TypeError, ValueError) as e:
                raise TM1modelDecodeException(f"invalid step: '{chore_task_as_dict.get('Step')}'", "ChoreTask") from e

        return cls(step=step, process_name=process_name, parameters=parameters)

    @property
    def step(self) -> int:
        return self._step

    @step.setter
    def step(self, value: int):
        self._step = value

    @property
    def process_name(self) -> str:
        return self._process_name

    @property
    def parameters(self) -> List[Dict]:
        return self._parameters

    @property
    def body_as_dict(self) -> Dict:
        body_as_dict = collections.OrderedDict()
        body_as_dict['Process@odata.bind'] = format_url("Processes('{}')", self._process_name)
        body_as_dict['Parameters'] = self._parameters
        return body_as_dict

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChoreTask):
            return NotImplemented
        return self.process_name == other.process_name and self.parameters == other.parameters

    def __hash__(self):
        return hash(self.body)
