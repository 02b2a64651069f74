# ============================================================================
# FILE: app/client/fetch.py
# ============================================================================
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

class FetchState(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"

@dataclass
class FetchResult:
    """
    Outcome of one API read. Only a successful result carries data;
    callers branch on the state instead of inspecting the payload.
    """
    state: FetchState = FetchState.PENDING
    data: Any = None
    status_code: Optional[int] = None
    error: Optional[str] = None

    @classmethod
    def pending(cls) -> "FetchResult":
        return cls()

    @classmethod
    def success(cls, data: Any, status_code: int = 200) -> "FetchResult":
        return cls(state=FetchState.SUCCESS, data=data, status_code=status_code)

    @classmethod
    def failure(cls, error: str, status_code: Optional[int] = None) -> "FetchResult":
        return cls(state=FetchState.ERROR, error=error, status_code=status_code)

    @property
    def ok(self) -> bool:
        return self.state == FetchState.SUCCESS

    def items(self) -> list:
        """The list payload of a successful read"""
        if not self.ok:
            raise ValueError(f"No data in a {self.state.value} result")
        return self.data
