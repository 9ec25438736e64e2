# 공용 의존성: app.state에 올려둔 업스트림 클라이언트를 라우터에 주입
from fastapi import Request

from wellness_api.core.config import Settings
from wellness_api.services.advice import AdviceClient
from wellness_api.services.mealdb import MealDBClient

def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_recipe_client(request: Request) -> MealDBClient:
    return request.app.state.recipe_client

def get_advice_client(request: Request) -> AdviceClient:
    return request.app.state.advice_client
