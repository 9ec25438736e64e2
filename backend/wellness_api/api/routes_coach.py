# wellness_api/api/routes_coach.py
# 마이크로 루틴 / 퀴즈 결과 조언 생성: LLM 텍스트를 JSON으로 받아 그대로 전달

from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException

from wellness_api.core.deps import get_advice_client
from wellness_api.models.schemas import GenericTipRequest, RoutineOut, RoutineRequest, TipOut
from wellness_api.services.advice import AdviceClient

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["coach"])

@router.post("/generate-routine", response_model=RoutineOut)
async def generate_routine(
    payload: RoutineRequest,
    advice: AdviceClient = Depends(get_advice_client),
):
    if payload.missing():
        raise HTTPException(status_code=400, detail="Faltan datos para generar la rutina.")
    try:
        return await advice.generate_routine(payload)
    except Exception:
        log.exception("Error en /api/generate-routine")
        raise HTTPException(status_code=500, detail="No se pudo generar la rutina.")

@router.post("/get-generic-tip", response_model=TipOut)
async def get_generic_tip(
    payload: GenericTipRequest,
    advice: AdviceClient = Depends(get_advice_client),
):
    if payload.missing():
        raise HTTPException(status_code=400, detail="Faltan el contexto y el resultado del quiz.")
    try:
        return await advice.generate_tip(payload)
    except Exception:
        log.exception("Error en /api/get-generic-tip")
        raise HTTPException(status_code=500, detail="No se pudo generar el consejo.")
