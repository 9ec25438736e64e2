# wellness_api/services/recipes.py
# TheMealDB 원본 레코드 → 프론트용 카드/상세 변환 (네트워크 호출 없음)
# - strIngredient1..20 / strMeasure1..20 번호 필드를 리스트로 수렴
# - strInstructions 는 "\r\n" 기준으로 줄 분리

from __future__ import annotations
from typing import Any, List, Mapping

from wellness_api.core.errors import MalformedMealError
from wellness_api.models.schemas import RecipeDetail, RecipeSummary

MAX_INGREDIENT_SLOTS = 20
LINE_BREAK = "\r\n"
TAG_SEP = ","

# 목록 카드 설명(카테고리 고정이라 원본에서 뽑지 않음)
VEGETARIAN_EXCERPT = "Una deliciosa y saludable opción vegetariana."

def summarize(meal: Mapping[str, Any]) -> RecipeSummary:
    return RecipeSummary(
        slug=meal.get("idMeal"),
        title=meal.get("strMeal"),
        excerpt=VEGETARIAN_EXCERPT,
        imageUrl=meal.get("strMealThumb"),
    )

def _ingredients(meal: Mapping[str, Any]) -> List[str]:
    out: List[str] = []
    for i in range(1, MAX_INGREDIENT_SLOTS + 1):
        ingredient = meal.get(f"strIngredient{i}")
        if not ingredient or not ingredient.strip():
            continue
        # 분량 없음(None)은 제외 사유가 아님 → 빈 문자열로 이어붙임
        measure = meal.get(f"strMeasure{i}") or ""
        out.append(f"{measure} {ingredient}".strip())
    return out

def _instructions(meal: Mapping[str, Any]) -> List[str]:
    text = meal.get("strInstructions")
    if text is None:
        raise MalformedMealError(f"meal {meal.get('idMeal')!r} has no strInstructions")
    return [line for line in text.split(LINE_BREAK) if line.strip()]

def _tags(meal: Mapping[str, Any]) -> List[str]:
    # 공백 trim 안 함(원본 그대로)
    raw = meal.get("strTags")
    return raw.split(TAG_SEP) if raw else []

def normalize_detail(meal: Mapping[str, Any]) -> RecipeDetail:
    """
    lookup.php 결과 1건 → RecipeDetail.
    - 재료: 1..20 슬롯 순서 유지, 재료명이 비었으면 제외
    - 조리법 누락은 기본값으로 메우지 않고 MalformedMealError
    - 태그 누락은 [] (조리법과 처리 방식이 다름, 의도적으로 유지)
    """
    return RecipeDetail(
        title=meal.get("strMeal"),
        imageUrl=meal.get("strMealThumb"),
        instructions=_instructions(meal),
        tags=_tags(meal),
        youtubeUrl=meal.get("strYoutube"),
        ingredients=_ingredients(meal),
    )
