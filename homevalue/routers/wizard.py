from fastapi import APIRouter, Depends, HTTPException
from starlette.status import HTTP_409_CONFLICT
from ..schemas import WizardRequest, WizardResponse
from ..core.security import rate_limit
from ..services.wizard import Step, StepTransitionError, can_advance, next_step, previous_step

router = APIRouter()

def _state(step: Step, form: dict) -> dict:
    return {"step": int(step), "name": step.name.lower(), "can_advance": can_advance(step, form)}

@router.post("/wizard/next", response_model=WizardResponse)
def post_next(body: WizardRequest, _lim = Depends(rate_limit)):
    form = body.form.model_dump()
    try:
        step = next_step(Step(body.step), form)
    except StepTransitionError as exc:
        raise HTTPException(status_code=HTTP_409_CONFLICT, detail=exc.reason)
    return _state(step, form)

@router.post("/wizard/back", response_model=WizardResponse)
def post_back(body: WizardRequest, _lim = Depends(rate_limit)):
    form = body.form.model_dump()
    return _state(previous_step(Step(body.step)), form)
