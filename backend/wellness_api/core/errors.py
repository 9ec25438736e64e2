# 업스트림(레시피 카탈로그/텍스트 생성) 실패 예외
# 라우터에서 전부 500으로 변환, 로그만 남기고 프로세스는 살린다


class UpstreamError(Exception):
    # 외부 API 호출 실패, 비정상 응답, JSON 파싱 실패 등
    pass


class MalformedMealError(UpstreamError):
    # 찾은 레시피 레코드인데 필수 필드(strInstructions)가 없음
    pass


class AdviceNotReady(UpstreamError):
    # 텍스트 생성 준비 미완(API 키 없음)
    pass
