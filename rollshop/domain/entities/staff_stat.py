from dataclasses import dataclass, field


@dataclass
class StaffStat:
    staff_id: str
    service_name: str
    total_count: int = 0
    transaction_count: int = 0
    total_money: int = 0
    refusal_summary: dict[str, int] = field(default_factory=dict)
    salary: int = 0
