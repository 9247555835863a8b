"""
Error taxonomy for CQL rendering. Every error is raised from `render` / `to_cql`, never from
    a condition constructor
"""

from typing import Any


class CQLError(Exception):
    """
    Base class for every error raised while turning conditions into CQL
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidConditionError(CQLError):
    """
    A condition was rendered while missing one of its required fields
    """

    def __init__(self, condition_type: str, condition: dict[str, Any], missing_attribute: str):
        self.condition_type = condition_type
        self.condition = condition
        self.missing_attribute = missing_attribute
        super().__init__(
            f"Condition of type '{condition_type}' is missing required attribute: {missing_attribute}."
        )


class UnsupportedConditionTypeError(CQLError):

    def __init__(self, condition_type: str, condition: Any):
        self.condition_type = condition_type
        self.condition = condition
        super().__init__(f"Unsupported condition type: {condition_type}.")


class SpatialOperationError(CQLError):

    def __init__(self, operator: str, reason: str):
        self.operator = operator
        self.reason = reason
        super().__init__(f"Error in spatial operation '{operator}': {reason}.")
