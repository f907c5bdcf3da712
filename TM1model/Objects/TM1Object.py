from abc import abstractmethod
from typing import Dict

from TM1model.Utils import dump_body


class TM1Object:
    """ Parent Class for all TM1 Objects e.g. Cube, Process, Dimension.

    """

    @property
    @abstractmethod
    def body_as_dict(self) -> Dict:
        pass

    @property
    def body(self) -> str:
        return dump_body(self.body_as_dict)

    def __hash__(self):
        return hash(self.body)

    def __str__(self):
        return self.body

    def __repr__(self):
        return "{}:{}".format(self.__class__.__name__, self.body)

    def __eq__(self, other):
        if not isinstance(other, TM1Object):
            return NotImplemented
        return self.body == other.body

    def __ne__(self, other):
        return not self == other
