from enum import Enum


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"

    @classmethod
    def _missing_(cls, value):
        # accept "Asc", "DESC", ...
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None
