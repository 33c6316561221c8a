"""Domain enumerations.

String-valued enums use the str mixin so they compare equal to plain strings
("asc" == SortDirection.ASC) and serialize cleanly.
"""

from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"
