from __future__ import annotations

import logging

from rollshop.application.exceptions import MissingAnnouncementFieldsError
from rollshop.domain.entities.pick_strategy import PickStrategy


def build_announcement(
    staff_id: str,
    service_name: str,
    price_info: str,
    pick_strategy: PickStrategy,
    slots: int,
    language: str = "en",
) -> str:
    """Recruitment text asking customers to roll for a service.

    Returns an empty string while staff, service and price are all blank.
    """
    staff_id = (staff_id or "").strip()
    service_name = (service_name or "").strip()
    price_info = (price_info or "").strip()
    if not staff_id and not service_name and not price_info:
        return ""

    lowest = PickStrategy(pick_strategy) is PickStrategy.MIN
    if language == "zh":
        target = f"【{price_info}{service_name or '业务名称未填'}（{staff_id or '店员未填'}）】"
        pick_text = "最小" if lowest else "最大"
        slot_text = f"{slots} 位大人" if slots > 1 else "1 位大人"
        return (
            f"打扰致歉——请想要指定{target}速写业务的大人，在说话频道复制【/random】进行 roll 点，"
            f"取点数{pick_text}的{slot_text}。"
        )

    price_part = f"{price_info} " if price_info else ""
    target = f"[{price_part}{service_name or 'service not set'} ({staff_id or 'staff not set'})]"
    pick_text = "lowest" if lowest else "highest"
    slot_text = f"{slots} customers" if slots > 1 else "1 customer"
    return (
        f"Sorry to interrupt! If you would like {target}, type /random in the say channel to roll. "
        f"The {slot_text} with the {pick_text} roll will be picked."
    )


class GenerateAnnouncementUseCase:
    def __init__(self, default_language: str = "en") -> None:
        self._default_language = default_language
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        staff_id: str,
        service_name: str,
        price_info: str,
        pick_strategy: PickStrategy,
        slots: int,
        language: str | None = None,
    ) -> str:
        if not (staff_id or "").strip() or not (service_name or "").strip():
            raise MissingAnnouncementFieldsError("Fill in the staff and service name first.")
        text = build_announcement(
            staff_id=staff_id,
            service_name=service_name,
            price_info=price_info,
            pick_strategy=pick_strategy,
            slots=slots,
            language=language or self._default_language,
        )
        self._logger.info("Announcement generated", extra={"staff_id": staff_id, "service": service_name})
        return text
