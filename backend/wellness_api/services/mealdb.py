# 목적: TheMealDB 공개 API 조회(목록 필터 / ID 상세)
# 의존: httpx (AsyncClient는 앱 생성 시 1회 만들고 주입받음)
# 재시도/캐시 없음: 실패는 바로 UpstreamError

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

import httpx

from wellness_api.core.errors import UpstreamError

log = logging.getLogger(__name__)

def build_http_client(base_url: str, timeout: float) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=base_url, timeout=timeout)

class MealDBClient:
    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _get_json(self, path: str, params: Dict[str, str]) -> Dict[str, Any]:
        try:
            r = await self._http.get(path, params=params)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            raise UpstreamError(f"mealdb {path} failed: {e}") from e
        except ValueError as e:  # 본문이 JSON 아님
            raise UpstreamError(f"mealdb {path} returned non-JSON body") from e
        if not isinstance(data, dict):
            raise UpstreamError(f"mealdb {path} returned unexpected payload")
        return data

    async def filter_by_category(self, category: str) -> List[Dict[str, Any]]:
        """카테고리 필터 목록. meals가 null이면 업스트림 형태 이상으로 본다."""
        data = await self._get_json("/filter.php", {"c": category})
        meals = data.get("meals")
        if not isinstance(meals, list):
            raise UpstreamError(f"mealdb filter c={category!r} returned no meals")
        log.debug("mealdb filter c=%s -> %d meals", category, len(meals))
        return meals

    async def lookup(self, meal_id: str) -> Optional[Dict[str, Any]]:
        # 없는 ID면 {"meals": null} → None (라우터에서 404)
        data = await self._get_json("/lookup.php", {"i": meal_id})
        meals = data.get("meals")
        if not meals:
            return None
        return meals[0]

    async def aclose(self) -> None:
        await self._http.aclose()
