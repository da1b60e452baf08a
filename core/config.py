import logging
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


# Lambda에서 SSM SecureString으로 주입받는 설정 항목 -> 파라미터 이름을 담은 환경 변수
SSM_SECRET_SOURCES = {
    "DB_PASSWORD": "DB_PASSWORD_SSM_NAME",
    "SECRET_KEY": "SECRET_KEY_SSM_NAME",
}


def _resolve_ssm_secrets() -> None:
    """Lambda 환경에서 DB 비밀번호와 JWT 서명 키를 SSM에서 읽어 환경 변수로 설정합니다.

    한 번의 get_parameters 호출로 모두 조회하며, 하나라도 조회에 실패하면
    환경 변수를 바꾸지 않고 RuntimeError를 발생시킵니다.
    Settings 생성 전에 호출되어야 합니다.
    """
    if os.getenv("AWS_LAMBDA_EXEC") != "true":
        return

    env_by_param = {
        os.environ[name_var]: env
        for env, name_var in SSM_SECRET_SOURCES.items()
        if os.getenv(name_var)
    }
    if not env_by_param:
        return

    import boto3  # aws extra, Lambda 런타임에 기본 포함

    try:
        response = boto3.client("ssm").get_parameters(
            Names=list(env_by_param), WithDecryption=True
        )
    except Exception:
        logger.exception("SSM 시크릿 조회 실패")
        raise

    invalid = response.get("InvalidParameters")
    if invalid:
        raise RuntimeError(f"SSM 파라미터 조회 실패: {invalid}")

    for param in response["Parameters"]:
        os.environ[env_by_param[param["Name"]]] = param["Value"]
    logger.info(f"SSM 시크릿 적용: {sorted(env_by_param.values())}")


_resolve_ssm_secrets()


class Settings(BaseSettings):
    """애플리케이션 설정을 관리하는 클래스.

    환경 변수와 .env 파일에서 설정을 로드합니다.

    Attributes:
        SECRET_KEY: JWT 토큰 서명 키.
        ALLOWED_ORIGINS: CORS 허용 오리진 목록.
        DB_HOST: MySQL 호스트 주소.
        DB_PORT: MySQL 포트 번호.
        DB_USER: MySQL 사용자명.
        DB_PASSWORD: MySQL 비밀번호.
        DB_NAME: MySQL 데이터베이스 이름.
        JWT_ACCESS_EXPIRE_MINUTES: Access Token 만료 시간(분).
        ERROR_LOG_FILE: 처리되지 않은 예외를 기록할 파일 경로.
    """

    SECRET_KEY: str
    ALLOWED_ORIGINS: list[str] = [
        "http://127.0.0.1:3000",  # 로컬 개발 (프론트엔드)
        "http://localhost:3000",
    ]

    DB_HOST: str
    DB_PORT: int
    DB_USER: str
    DB_PASSWORD: str
    DB_NAME: str
    DB_POOL_MAX_SIZE: int = 10

    JWT_ACCESS_EXPIRE_MINUTES: int = 30

    # 프로덕션에서는 False로 설정하여 상세 에러 메시지 노출 방지
    DEBUG: bool = True

    ERROR_LOG_FILE: str = "server_error.log"
    TRUSTED_PROXIES: set[str] = set()  # 프로덕션에서 nginx 등의 프록시 IP 설정 필요

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()  # type: ignore[call-arg]  # pydantic-settings는 .env에서 환경 변수를 불러옴.
