from enum import Enum


class PickStrategy(str, Enum):
    MAX = "max"
    MIN = "min"
