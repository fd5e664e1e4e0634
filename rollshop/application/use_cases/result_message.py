from __future__ import annotations

from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.transaction_record import NO_REFUSAL, TransactionRecord


def render_roll_result_message(record: TransactionRecord, language: str = "en") -> str:
    """Announce the winners of a raffle round."""
    winners = record.selected_customers
    if not winners:
        return _no_winners_notice(language)

    winner_lines = "；".join(
        f"{idx}. {c.customer_id}（{c.roll_value}点）" for idx, c in enumerate(winners, start=1)
    )
    count = len(winners)
    staff_text = f"[{record.staff_id}]" if record.staff_id else _placeholder(language)
    service_text = record.service_name or _placeholder(language)
    highest = record.pick_strategy is PickStrategy.MAX

    if language == "zh":
        pick_text = "最高" if highest else "最低"
        lines = [
            f"本次 roll 点结束！共选出 {count} 位顾客：{winner_lines}。",
            f"老师 {staff_text} 将提供 [{service_text}] 服务，名额：{record.amount}。",
            f"取点规则：{pick_text}点优先。请{count}位大人稍后等待我私聊。",
        ]
        if record.money:
            lines.append(f"交易金额：{record.money} 金币（或等价单位）。")
        if record.refusal_type and record.refusal_type != NO_REFUSAL:
            lines.append(f"拒接类型：{record.refusal_type}（已协调）。")
        return "\n".join(lines)

    pick_text = "highest" if highest else "lowest"
    noun = "customer" if count == 1 else "customers"
    lines = [
        f"The roll is over! {count} {noun} selected: {winner_lines}.",
        f"Operator {staff_text} will provide [{service_text}], slots: {record.amount}.",
        f"Rule: {pick_text} roll wins. The {count} selected {noun} will be messaged privately shortly.",
    ]
    if record.money:
        lines.append(f"Transaction amount: {record.money} gil.")
    if record.refusal_type and record.refusal_type != NO_REFUSAL:
        lines.append(f"Refusal type: {record.refusal_type} (resolved).")
    return "\n".join(lines)


def _no_winners_notice(language: str) -> str:
    if language == "zh":
        return "本次未筛选出符合条件的顾客，请检查输入数据或名额数量。"
    return "No qualifying customers were found this round. Please check the pasted log or the slot count."


def _placeholder(language: str) -> str:
    if language == "zh":
        return "（未填写）"
    return "(not provided)"
