# wellness_api/services/advice.py
# 웰니스 코치 텍스트 생성 (Gemini, OpenAI 호환 엔드포인트)
# - Chat Completions 1회 호출 → 코드펜스 제거 → JSON 파싱
# - 파싱은 예외 대신 ParseResult 로 돌려줌 (라우터가 실패 종류를 구분)

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from openai import AsyncOpenAI, OpenAIError
from pydantic import ValidationError

from wellness_api.core.config import Settings
from wellness_api.core.errors import AdviceNotReady, UpstreamError
from wellness_api.models.schemas import GenericTipRequest, RoutineOut, RoutineRequest, TipOut

log = logging.getLogger(__name__)

ROUTINE_TEMPERATURE = 0.9
TIP_TEMPERATURE = 0.8

FENCE_MARKERS = ("```json", "```")


@dataclass
class ParseResult:
    ok: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


def extract_json(text: Optional[str]) -> ParseResult:
    """모델 출력에서 ```json / ``` 표시를 걷어내고 JSON 객체로 파싱."""
    s = text or ""
    for marker in FENCE_MARKERS:
        s = s.replace(marker, "")
    s = s.strip()
    if not s:
        return ParseResult(ok=False, error="empty model output")
    try:
        obj = json.loads(s)
    except json.JSONDecodeError as e:
        return ParseResult(ok=False, error=f"invalid JSON: {e.msg}")
    if not isinstance(obj, dict):
        return ParseResult(ok=False, error="model output is not a JSON object")
    return ParseResult(ok=True, data=obj)


def build_routine_prompt(req: RoutineRequest) -> str:
    return (
        "Eres un coach de bienestar experto en crear micro-rutinas hiper-personalizadas.\n"
        f"Contexto: Objetivo={req.objective}, Tiempo={req.time} min, "
        f"Energía={req.energy}, Ubicación={req.location}.\n"
        'Responde SOLAMENTE con un objeto JSON con el formato '
        '{"name": "Título Creativo", "description": "Descripción de la actividad."}.'
    )


def build_tip_prompt(req: GenericTipRequest) -> str:
    return (
        f"Eres un coach de bienestar empático. El resultado principal de un quiz sobre "
        f'{req.context} es: "{req.result}".\n'
        "Basado en esto, genera un consejo corto, accionable y positivo de 2 a 4 frases.\n"
        'Responde SOLAMENTE con un objeto JSON con el formato {"tip": "Tu consejo personalizado aquí."}.'
    )


class AdviceClient:
    def __init__(self, settings: Settings):
        self._settings = settings
        self._client: Optional[AsyncOpenAI] = None

    def _openai(self) -> AsyncOpenAI:
        # 키가 없어도 앱은 뜬다. 생성 라우트 호출 시점에만 실패
        if self._client is None:
            api_key = self._settings.GEMINI_API_KEY
            if not api_key:
                raise AdviceNotReady("GEMINI_API_KEY not set")
            self._client = AsyncOpenAI(api_key=api_key, base_url=self._settings.LLM_BASE_URL)
        return self._client

    async def complete(self, prompt: str, temperature: float) -> str:
        client = self._openai()
        try:
            chat = await client.chat.completions.create(
                model=self._settings.LLM_MODEL,
                temperature=temperature,
                messages=[{"role": "user", "content": prompt}],
            )
        except OpenAIError as e:
            raise UpstreamError(f"chat completion failed: {e}") from e
        text = chat.choices[0].message.content if chat and chat.choices else ""
        return text or ""

    async def _complete_json(self, prompt: str, temperature: float) -> Dict[str, Any]:
        text = await self.complete(prompt, temperature)
        parsed = extract_json(text)
        if not parsed.ok:
            log.warning("model returned unparseable text: %s", parsed.error)
            raise UpstreamError(parsed.error)
        return parsed.data

    async def generate_routine(self, req: RoutineRequest) -> RoutineOut:
        data = await self._complete_json(build_routine_prompt(req), ROUTINE_TEMPERATURE)
        try:
            return RoutineOut(**data)
        except ValidationError as e:
            raise UpstreamError("routine JSON missing name/description") from e

    async def generate_tip(self, req: GenericTipRequest) -> TipOut:
        data = await self._complete_json(build_tip_prompt(req), TIP_TEMPERATURE)
        try:
            return TipOut(**data)
        except ValidationError as e:
            raise UpstreamError("tip JSON missing tip") from e

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()
