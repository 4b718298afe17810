"""Address and transfer models."""
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from wallet_console.utils.errors import ValidationFailure


class Address(BaseModel):
    """Funds-holding address of a wallet with per-currency balances."""
    id: str = Field(..., min_length=1, description="Address identifier")
    wallet_id: str = Field(..., alias="walletId", min_length=1, description="Owning wallet")
    network: str = Field(..., description="Blockchain network")
    balances: Dict[str, str] = Field(default_factory=dict, description="Currency symbol -> decimal amount")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("balances", mode="before")
    @classmethod
    def balances_are_decimal_strings(cls, value: Any) -> Dict[str, str]:
        if not isinstance(value, dict):
            raise ValueError("balances must be an object")
        balances = {}
        for symbol, amount in value.items():
            if isinstance(amount, bool) or not isinstance(amount, (str, int)):
                raise ValueError(f"balance for {symbol} must be a decimal string")
            text = str(amount)
            try:
                Decimal(text)
            except InvalidOperation:
                raise ValueError(f"balance for {symbol} is not a decimal: {text!r}")
            balances[str(symbol)] = text
        return balances

    def balance_entries(self) -> List[Tuple[str, str]]:
        """Balances as (symbol, amount) pairs, ordered by symbol."""
        return sorted(self.balances.items(), key=lambda item: item[0])


class TransferRequest(BaseModel):
    """Transfer form state. Fields are raw user input."""
    destination_address: str = ""
    amount: str = ""
    asset: str = ""

    def is_complete(self) -> bool:
        return bool(self.destination_address and self.amount and self.asset)

    def validate_for_submit(self) -> Decimal:
        """
        Check the submit preconditions.

        Returns:
            The parsed amount

        Raises:
            ValidationFailure: If a field is empty or the amount is not a
                non-negative number
        """
        if not self.is_complete():
            raise ValidationFailure("Destination address, amount and asset are required")
        return parse_amount(self.amount)

    def to_payload(self) -> dict:
        """Wire body for the transfers endpoint."""
        return {
            "destination_address": self.destination_address,
            "amount": self.amount,
            "asset": self.asset,
        }

    def clear(self):
        self.destination_address = ""
        self.amount = ""
        self.asset = ""


class TransferResult(BaseModel):
    """Successful transfer response."""
    transaction_link: str = Field(..., alias="transactionLink", description="Explorer link, shown verbatim")

    model_config = ConfigDict(populate_by_name=True)


def parse_amount(text: str) -> Decimal:
    """
    Parse a user-entered asset amount.

    Amounts are kept as arbitrary-precision decimals since token amounts can
    exceed float precision.
    """
    try:
        amount = Decimal(text.strip())
    except (InvalidOperation, AttributeError):
        raise ValidationFailure(f"Amount must be a number: {text!r}")
    if not amount.is_finite():
        raise ValidationFailure(f"Amount must be a finite number: {text!r}")
    if amount < 0:
        raise ValidationFailure("Amount must not be negative")
    return amount
