import logging
import traceback
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"
VALIDATION_ERROR_MESSAGE = "request validation failed"


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """
    把 HTTPException 统一渲染为 {"message": ...}
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    处理请求验证异常
    """
    error_detail = []
    for error in exc.errors():
        error_detail.append({
            "loc": list(error.get("loc", [])),
            "msg": error.get("msg", ""),
            "type": error.get("type", "")
        })

    logger.error(f"请求验证错误: {request.method} {request.url.path} {error_detail}")

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "message": VALIDATION_ERROR_MESSAGE,
            "errors": error_detail,
        }
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    """
    处理未被端点捕获的SQLAlchemy异常，错误细节只写日志
    """
    logger.error(f"数据库错误: {request.method} {request.url.path} - {exc}")
    logger.error(traceback.format_exc())

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE}
    )


async def global_exception_handler(request: Request, exc: Exception):
    """
    全局异常处理器，捕获所有未处理的异常
    """
    logger.error(f"未处理的异常: {request.method} {request.url.path} - {exc.__class__.__name__}: {exc}")
    logger.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR_MESSAGE}
    )


def register_exception_handlers(app: FastAPI):
    """
    注册所有异常处理器到FastAPI应用
    """
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
