from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field

# 요청 바디: 필수 여부는 라우터에서 직접 검사(누락/빈값 → 400)
# 여기서 required로 막으면 FastAPI가 422를 내보내므로 전부 Optional
class RoutineRequest(BaseModel):
    objective: Optional[str] = None
    time: Optional[Union[int, float, str]] = None  # 분 단위, 숫자/문자 둘 다 허용
    energy: Optional[str] = None
    location: Optional[str] = None

    def missing(self) -> bool:
        return not (self.objective and self.time and self.energy and self.location)

class GenericTipRequest(BaseModel):
    context: Optional[str] = None
    result: Optional[str] = None

    def missing(self) -> bool:
        return not (self.context and self.result)

# LLM 응답(JSON) 형태: 키가 없으면 업스트림 오류로 취급
class RoutineOut(BaseModel):
    name: str
    description: str

class TipOut(BaseModel):
    tip: str

# 레시피 목록 카드: 업스트림 값을 타입 변환 없이 그대로 전달
class RecipeSummary(BaseModel):
    slug: Optional[Any] = None
    title: Optional[Any] = None
    excerpt: str
    imageUrl: Optional[Any] = None

# 레시피 상세(모달)
class RecipeDetail(BaseModel):
    title: Optional[Any] = None
    imageUrl: Optional[Any] = None
    instructions: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    youtubeUrl: Optional[Any] = None
    ingredients: List[str] = Field(default_factory=list)
