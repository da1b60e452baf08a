"""utils: 유틸리티 함수들을 모아놓은 패키지.

Modules:
    exceptions: 도메인 예외
    result: 서비스 결과 타입 (Ok/Err)
    jwt_utils: Access Token 발급 및 검증
"""
