"""Link kind enum."""

from enum import Enum


class LinkKind(str, Enum):
    ABSOLUTE = "absolute"
    RELATIVE = "relative"
