# -*- coding: utf-8 -*-

import collections
from typing import Dict, Iterable, List

from TM1model.Objects.ChoreFrequency import ChoreFrequency
from TM1model.Objects.ChoreStartTime import ChoreStartTime
from TM1model.Objects.ChoreTask import ChoreTask
from TM1model.Objects.TM1Object import TM1Object
from TM1model.Utils import expect_dict, expect_list, load_json


class Chore(TM1Object):
    """ Abstraction of TM1 Chore

    """
    SINGLE_COMMIT = 'SingleCommit'
    MULTIPLE_COMMIT = 'MultipleCommit'

    def __init__(self, name: str, start_time: ChoreStartTime, dst_sensitivity: bool, active: bool,
                 execution_mode: str, frequency: ChoreFrequency, tasks: Iterable[ChoreTask] = None):
        self._name = name
        self._start_time = start_time
        self._dst_sensitivity = dst_sensitivity
        self._active = active
        self._execution_mode = execution_mode
        self._frequency = frequency
        self._tasks = list(tasks) if tasks else []

    @classmethod
    def from_json(cls, chore_as_json: str) -> 'Chore':
        """ Alternative constructor

        :param chore_as_json: string, JSON. Response of /Chores('x')?$expand=Tasks($expand=*)
        :return: Chore, an instance of this class
        """
        return cls.from_dict(load_json(chore_as_json, "Chore"))

    @classmethod
    def from_dict(cls, chore_as_dict: Dict) -> 'Chore':
        """ Alternative constructor. Steps are numbered by position in Tasks

        :param chore_as_dict: Chore as dict
        :return: Chore, an instance of this class
        """
        chore_as_dict = expect_dict(chore_as_dict, "Chore")
        return cls(name=chore_as_dict.get('Name') or '',
                   start_time=ChoreStartTime.from_string(chore_as_dict.get('StartTime')),
                   dst_sensitivity=chore_as_dict.get('DSTSensitive', False),
                   active=chore_as_dict.get('Active', False),
                   execution_mode=chore_as_dict.get('ExecutionMode', cls.SINGLE_COMMIT),
                   frequency=ChoreFrequency.from_string(chore_as_dict.get('Frequency')),
                   tasks=[ChoreTask.from_dict(task, step)
                          for step, task
                          in enumerate(expect_list(chore_as_dict.get('Tasks'), "Chore"))])

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, name: str):
        self._name = name

    @property
    def start_time(self) -> ChoreStartTime:
        return self._start_time

    @start_time.setter
    def start_time(self, start_time: ChoreStartTime):
        self._start_time = start_time

    @property
    def dst_sensitivity(self) -> bool:
        return self._dst_sensitivity

    @property
    def active(self) -> bool:
        return self._active

    @property
    def execution_mode(self) -> str:
        return self._execution_mode

    @execution_mode.setter
    def execution_mode(self, execution_mode: str):
        self._execution_mode = execution_mode

    @property
    def frequency(self) -> ChoreFrequency:
        return self._frequency

    @frequency.setter
    def frequency(self, frequency: ChoreFrequency):
        self._frequency = frequency

    @property
    def tasks(self) -> List[ChoreTask]:
        return self._tasks

    @property
    def process_names(self) -> List[str]:
        return [task.process_name for task in self._tasks]

    def add_task(self, task: ChoreTask):
        task.step = len(self._tasks)
        self._tasks.append(task)

    def insert_task(self, new_task: ChoreTask):
        self._tasks.insert(new_task.step, new_task)
        for step, task in enumerate(self._tasks):
            task.step = step

    def activate(self):
        self._active = True

    def deactivate(self):
        self._active = False

    def reschedule(self, days: int = 0, hours: int = 0, minutes: int = 0, seconds: int = 0):
        self._start_time.add(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @property
    def body_as_dict(self) -> Dict:
        """
        construct body from the class attributes
        :return: Dict, TM1 JSON representation of a chore
        """
        body_as_dict = collections.OrderedDict()
        body_as_dict['Name'] = self._name
        body_as_dict['StartTime'] = self._start_time.start_time_string
        body_as_dict['DSTSensitive'] = self._dst_sensitivity
        body_as_dict['Active'] = self._active
        body_as_dict['ExecutionMode'] = self._execution_mode
        body_as_dict['Frequency'] = self._frequency.frequency_string
        body_as_dict['Tasks'] = [task.body_as_dict for task in self._tasks]
        return body_as_dict
