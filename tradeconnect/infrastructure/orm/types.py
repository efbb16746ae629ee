"""Column helpers"""

from enum import Enum
from typing import Type

from sqlalchemy import Enum as SQLEnum


def enum_column_type(enum_cls: Type[Enum]) -> SQLEnum:
    """Store the enum's value (not its member name) in a plain string column."""
    return SQLEnum(
        enum_cls,
        native_enum=False,
        values_callable=lambda members: [member.value for member in members],
        length=32,
        validate_strings=True,
    )
