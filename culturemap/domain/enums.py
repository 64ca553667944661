"""Domain enums."""

from enum import Enum


class TravelMode(str, Enum):
    WALK = "walk"
    DRIVE = "drive"
