from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

ERROR_KIND_HEADER = "X-Error-Kind"


class ErrorKind(str, Enum):
    MISSING_AMOUNT_PARAM = "MISSING_AMOUNT_PARAM"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    DEPOSIT_FAIL = "DEPOSIT_FAIL"
    WITHDRAW_FAIL = "WITHDRAW_FAIL"


class AccountSnapshot(BaseModel):
    name: str = Field(default="UNKNOWN", description="Account holder as reported by the service")
    balance: Optional[int] = Field(default=None, ge=0, description="Whole currency units, None if unknown")
    online: bool = False

    @property
    def balance_label(self) -> str:
        if self.balance is None:
            return "Balance: $????.??"
        return f"Balance: ${self.balance}.00"

    @property
    def status_label(self) -> str:
        return "Service Status: Online" if self.online else "Service Status: Offline"
