# ruff: noqa: F401
from TM1model.Exceptions.Exceptions import (
    TM1modelDecodeException,
    TM1modelEncodeException,
    TM1modelException,
    TM1modelInvalidNameException,
    TM1modelMissingBindingException,
)
