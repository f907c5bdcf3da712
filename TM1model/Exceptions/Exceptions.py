# -*- coding: utf-8 -*-

# TM1model Exceptions are defined here


class TM1modelException(Exception):
    """The default exception for TM1model."""

    def __init__(self, message: str):
        """
        :param message: Exception message
        """
        super(TM1modelException, self).__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class TM1modelDecodeException(TM1modelException):
    """Exception for payloads that can't be turned into TM1model objects.

    Raised for malformed JSON, unknown `@odata.type` discriminators and
    payloads with an unexpected structure.
    """

    def __init__(self, message: str, payload_type: str = None):
        """
        :param message: Exception message
        :param payload_type: Optional name of the entity that was decoded, e.g. 'View'
        """
        self.payload_type = payload_type
        if payload_type:
            message = f"Failed to decode {payload_type}: {message}"
        super(TM1modelDecodeException, self).__init__(message)


class TM1modelMissingBindingException(TM1modelException):
    """Exception for bodies that can't be emitted since a required field is empty."""

    def __init__(self, field: str, entity: str = None):
        """
        :param field: Name of the missing field, e.g. 'dimension_name'
        :param entity: Optional description of the object, e.g. "Subset 'Top10'"
        """
        self.field = field
        self.entity = entity
        message = f"'{field}' must not be empty"
        if entity:
            message = f"{entity}: {message}"
        super(TM1modelMissingBindingException, self).__init__(message)


class TM1modelEncodeException(TM1modelException):
    """Exception for failing JSON serialization of a body."""

    def __init__(self, message: str):
        super(TM1modelEncodeException, self).__init__(f"Failed to encode body: {message}")


class TM1modelInvalidNameException(TM1modelException):
    """Exception for object names that can't be used in an OData reference."""

    def __init__(self, name: str):
        """
        :param name: the rejected object name
        """
        self.name = name
        super(TM1modelInvalidNameException, self).__init__(
            f"Name '{name}' must not contain single quotes")
