from fastapi import APIRouter, Depends, HTTPException

from rollshop.api.v1.schemas import (
    AnnouncementRequestSchema, AnnouncementResponseSchema,
    CustomerRollSchema, ParseRequestSchema, ParseResponseSchema,
    PresetsResponseSchema, RunRollRequestSchema, RunRollResponseSchema,
    TransactionRecordSchema,
)
from rollshop.application.exceptions import RecordStoreError
from rollshop.application.use_cases.announcement import GenerateAnnouncementUseCase
from rollshop.application.use_cases.run_roll import RunRollUseCase
from rollshop.application.utils.roll_parser import parse_customer_rolls
from rollshop.core.config import settings
from rollshop.domain.entities.pick_strategy import PickStrategy
from rollshop.domain.entities.presets import PRESET_REFUSAL_TYPES, PRESET_SERVICES
from rollshop.wiring.dependencies import get_announcement_use_case, get_run_roll_use_case

router = APIRouter()


def _strategy(value: PickStrategy | None) -> PickStrategy:
    return value or PickStrategy(settings.DEFAULT_PICK_STRATEGY)


@router.get("/presets", response_model=PresetsResponseSchema)
def presets():
    return PresetsResponseSchema(services=list(PRESET_SERVICES), refusal_types=list(PRESET_REFUSAL_TYPES))


@router.post("/rolls/parse", response_model=ParseResponseSchema)
def parse_rolls(req: ParseRequestSchema):
    rolls = parse_customer_rolls(req.text)
    return ParseResponseSchema(rolls=[CustomerRollSchema.from_entity(r) for r in rolls])


@router.post("/rolls", response_model=RunRollResponseSchema)
def run_roll(
    req: RunRollRequestSchema,
    uc: RunRollUseCase = Depends(get_run_roll_use_case),
):
    try:
        outcome = uc.execute(
            text=req.text,
            staff_id=req.staff_id,
            service_name=req.service_name,
            slots=req.slots,
            pick_strategy=_strategy(req.pick_strategy),
            money=req.money,
            refusal_type=req.refusal_type,
            language=req.language,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordStoreError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return RunRollResponseSchema(
        record=TransactionRecordSchema.from_entity(outcome.record),
        message=outcome.message,
    )


@router.post("/announcements", response_model=AnnouncementResponseSchema)
def announce(
    req: AnnouncementRequestSchema,
    uc: GenerateAnnouncementUseCase = Depends(get_announcement_use_case),
):
    try:
        text = uc.execute(
            staff_id=req.staff_id,
            service_name=req.service_name,
            price_info=req.price_info,
            pick_strategy=_strategy(req.pick_strategy),
            slots=req.slots,
            language=req.language,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AnnouncementResponseSchema(text=text)
