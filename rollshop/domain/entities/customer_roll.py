from dataclasses import dataclass


@dataclass(frozen=True)
class CustomerRoll:
    customer_id: str
    roll_value: int

    def display(self) -> str:
        return f"{self.customer_id}({self.roll_value})"
