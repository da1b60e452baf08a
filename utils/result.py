"""result: 서비스 결과 타입 모듈.

서비스 메서드는 예외를 던지는 대신 Ok 또는 Err를 반환하고,
경계 계층(컨트롤러)이 Err를 HTTP 응답으로 변환합니다.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from utils.exceptions import DomainError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """성공 결과."""

    value: T


@dataclass(frozen=True)
class Err:
    """실패 결과. 발생한 도메인 예외를 담습니다."""

    error: DomainError


Result = Union[Ok[T], Err]
