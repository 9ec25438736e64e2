from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from wellness_api.core.config import Settings
from wellness_api.main import create_app
from wellness_api.services.advice import AdviceClient
from wellness_api.services.mealdb import MealDBClient

MEALDB_BASE = "https://mealdb.test/api/json/v1/1"


def make_meal(**overrides: Any) -> Dict[str, Any]:
    meal: Dict[str, Any] = {
        "idMeal": "52771",
        "strMeal": "Spicy Arrabiata Penne",
        "strMealThumb": "https://img.test/penne.jpg",
        "strInstructions": "Bring water to a boil.\r\nAdd penne.\r\n\r\nServe.",
        "strTags": "Pasta,Curry",
        "strYoutube": "https://www.youtube.com/watch?v=1IszT_guI08",
    }
    for i in range(1, 21):
        meal[f"strIngredient{i}"] = None
        meal[f"strMeasure{i}"] = None
    meal.update(overrides)
    return meal


class FakeMealDB:
    """httpx.MockTransport 핸들러: filter.php / lookup.php 응답을 흉내"""

    def __init__(self):
        self.listing: Optional[List[Dict[str, Any]]] = []
        self.meals: Dict[str, Dict[str, Any]] = {}
        self.status = 200
        self.broken: Optional[str] = None  # "connect" | "html" | "list"
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.broken == "connect":
            raise httpx.ConnectError("connection refused", request=request)
        if self.broken == "html":
            return httpx.Response(200, text="<html>")
        if self.broken == "list":
            return httpx.Response(200, json=[])
        if self.status != 200:
            return httpx.Response(self.status, text="upstream down")
        if request.url.path.endswith("/filter.php"):
            return httpx.Response(200, json={"meals": self.listing})
        if request.url.path.endswith("/lookup.php"):
            meal = self.meals.get(request.url.params.get("i"))
            return httpx.Response(200, json={"meals": [meal] if meal else None})
        return httpx.Response(404)


class FakeCompletions:
    def __init__(self):
        self.text = ""
        self.error: Optional[Exception] = None
        self.calls: List[Dict[str, Any]] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.text)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test-key", MEALDB_BASE_URL=MEALDB_BASE, RECIPE_CATEGORY="Vegetarian")


@pytest.fixture
def mealdb():
    return FakeMealDB()


@pytest.fixture
def completions():
    return FakeCompletions()


@pytest.fixture
def client(settings, mealdb, completions):
    http = httpx.AsyncClient(base_url=MEALDB_BASE, transport=httpx.MockTransport(mealdb))
    advice = AdviceClient(settings)
    advice._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    app = create_app(settings, recipe_client=MealDBClient(http), advice_client=advice)
    return TestClient(app)
