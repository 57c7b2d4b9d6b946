from __future__ import annotations

DEFAULT_MAX_STRING_LENGTH = 100
DEFAULT_MAX_ARRAY_LENGTH = 100


class Absent:
    """A key that was never set.

    Distinct from `None`, which is a key explicitly set to `null`.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "ABSENT"

    def __copy__(self) -> Absent:
        return self

    def __deepcopy__(self, memo: dict) -> Absent:
        return self

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = Absent()
