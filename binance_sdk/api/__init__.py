"""엔드포인트 래퍼 (제품군별 하위 패키지)"""
