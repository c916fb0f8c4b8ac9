from enum import Enum
from typing import Optional


class Format(Enum):
    CSV = "csv"
    TXT = "txt"
    UNSUPPORTED = "unsupported"

    @classmethod
    def match(cls, keyword: Optional[str]) -> "Format":
        """
        Map a user-supplied keyword like "csv" to a Format. Anything we don't know
        about maps to UNSUPPORTED rather than raising.
        """
        if keyword is None:
            return cls.UNSUPPORTED
        for fmt in cls:
            if fmt is not cls.UNSUPPORTED and fmt.value == keyword:
                return fmt
        return cls.UNSUPPORTED


class Operator(Enum):
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
