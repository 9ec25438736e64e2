# wellness_api/api/routes_recipes.py
# TheMealDB 목록/상세 → 카드/상세 뷰 변환 후 반환

from __future__ import annotations
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from wellness_api.core.config import Settings
from wellness_api.core.deps import get_app_settings, get_recipe_client
from wellness_api.models.schemas import RecipeDetail, RecipeSummary
from wellness_api.services.mealdb import MealDBClient
from wellness_api.services.recipes import normalize_detail, summarize

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["recipes"])

@router.get("/healthy-recipes", response_model=List[RecipeSummary])
async def healthy_recipes(
    mealdb: MealDBClient = Depends(get_recipe_client),
    settings: Settings = Depends(get_app_settings),
):
    """카테고리(기본 Vegetarian) 목록을 카드 배열로"""
    try:
        meals = await mealdb.filter_by_category(settings.RECIPE_CATEGORY)
        return [summarize(m) for m in meals]
    except Exception:
        log.exception("Error en /api/healthy-recipes")
        raise HTTPException(status_code=500, detail="No se pudieron obtener las recetas.")

@router.get("/recipes/{meal_id}", response_model=RecipeDetail)
async def recipe_detail(meal_id: str, mealdb: MealDBClient = Depends(get_recipe_client)):
    """ID 상세 조회. 업스트림에 없으면 404, 그 외 실패는 500"""
    try:
        meal = await mealdb.lookup(meal_id)
    except Exception:
        log.exception("Error en /api/recipes/%s", meal_id)
        raise HTTPException(status_code=500, detail="No se pudo obtener el detalle de la receta.")

    if meal is None:
        raise HTTPException(status_code=404, detail="Receta no encontrada.")

    try:
        return normalize_detail(meal)
    except Exception:
        # strInstructions 누락 등 업스트림 형태 이상
        log.exception("Error en /api/recipes/%s", meal_id)
        raise HTTPException(status_code=500, detail="No se pudo obtener el detalle de la receta.")
