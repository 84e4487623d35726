# logger.py
"""
로깅 설정 및 logger 객체 반환 함수

    - 터미널 출력: 기본 활성화 (레벨별 색상)
    - 구조화된 로깅: LOG_JSON_FORMAT=true 이면 JSON 한 줄 출력
    - 파일/DB 저장은 하지 않음 (이벤트 로그는 외부 스토어로 전송)
"""
import json
import logging
import os
from datetime import datetime
from typing import Any, Dict, Optional, Set


class ColoredFormatter(logging.Formatter):
    """컬러 로그 포맷터"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m',
    }

    def format(self, record):
        # 원본 record를 건드리면 다른 핸들러 출력에도 색상 코드가 남음
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.COLORS['RESET']}"
        return super().format(record)


class JSONFormatter(logging.Formatter):
    """JSON 형식 로그 포맷터"""

    def format(self, record):
        log_entry: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_entry['exception'] = self.formatException(record.exc_info)

        # log_with_context()로 넘긴 추가 필드
        if hasattr(record, 'extra_fields'):
            log_entry.update(record.extra_fields)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


# get_logger()로 만든 로거 이름 (configure_logging 재설정 대상)
_registered_loggers: Set[str] = set()
_defaults: Dict[str, Any] = {"level": "INFO", "json": False}


def _build_formatter(enable_json_format: bool) -> logging.Formatter:
    if enable_json_format:
        return JSONFormatter()
    return ColoredFormatter('[%(asctime)s] %(levelname)s - %(name)s - %(message)s')


def get_logger(
    name: str = "app",
    level: Optional[str] = None,
    enable_json_format: Optional[bool] = None,
) -> logging.Logger:
    """
    logger 객체 생성 및 포맷 지정

    Args:
        name: 로거 이름
        level: 로그 레벨 (미지정 시 configure_logging 으로 정한 값, 기본 INFO)
        enable_json_format: JSON 형식 사용 여부 (미지정 시 configure_logging 으로 정한 값)
    """
    # httpx 요청 로그는 스토어 전송마다 찍히므로 경고 이상만
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    _registered_loggers.add(name)

    # 이미 핸들러가 설정되어 있으면 기존 로거 반환
    if logger.handlers:
        return logger

    if level is None:
        level = _defaults["level"]
    if enable_json_format is None:
        enable_json_format = _defaults["json"]

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_build_formatter(enable_json_format))
    logger.addHandler(console_handler)

    return logger


def configure_logging(level: str = "INFO", enable_json_format: bool = False) -> None:
    """
    설정값(LOG_LEVEL / LOG_JSON_FORMAT)으로 로깅 재설정
    - import 시점에 이미 만들어진 로거까지 레벨/포맷 변경
    - 이후 get_logger() 기본값도 함께 변경
    """
    _defaults["level"] = level
    _defaults["json"] = enable_json_format

    log_level = getattr(logging, level.upper(), logging.INFO)
    for name in _registered_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        for handler in logger.handlers:
            handler.setFormatter(_build_formatter(enable_json_format))


def log_with_context(logger: logging.Logger, level: str, message: str, **kwargs):
    """
    컨텍스트 정보와 함께 로깅

    Args:
        logger: 로거 객체
        level: 로그 레벨
        message: 로그 메시지
        **kwargs: 추가 컨텍스트 정보 (JSON 포맷에서 필드로 펼쳐짐)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.log(log_level, message, extra={'extra_fields': kwargs})


def get_logger_from_env(name: str = "app") -> logging.Logger:
    """환경 변수를 기반으로 로거 생성 (Settings 로드 전 기동 로그용)"""
    return get_logger(
        name=name,
        level=os.getenv("LOG_LEVEL", "INFO"),
        enable_json_format=os.getenv("LOG_JSON_FORMAT", "false").lower() == "true",
    )
