"""
统一异常处理器。

挂到 DRF 的 EXCEPTION_HANDLER setting 上，所有 APIView 的异常都从这里出去。

V3 intake 错误（IntakeApiError 及子类）:
{
    "errors": [
        {"status": 422, "code": "unknown_contestation_type", "title": "Cannot contest that type"}
    ]
}

其他业务错误:
{
    "type":    "validation_error" | "block",
    "code":    "MALFORMED_REQUEST",
    "message": "Request is missing required object: data.",
    "detail":  { ... }  // 可选
}
"""

from rest_framework.views import exception_handler as drf_default_handler
from rest_framework.exceptions import ValidationError as DRFValidationError
from django.http import JsonResponse

from .exceptions import BaseAppException, IntakeApiError


def render_app_exception(exc):
    """BaseAppException → JsonResponse。"""
    if isinstance(exc, IntakeApiError):
        body = {'errors': [error.as_json() for error in exc.errors]}
        return JsonResponse(body, status=exc.http_status)

    body = {
        'type': exc.type,
        'code': exc.code,
        'message': exc.message,
    }
    if exc.detail is not None:
        body['detail'] = exc.detail
    return JsonResponse(body, status=exc.http_status)


def unified_exception_handler(exc, context):
    """
    DRF exception handler entry point.

    优先级：
    1. BaseAppException 及其子类 → 统一格式（IntakeApiError 走 errors 列表）
    2. DRF 自带的 ValidationError → 转成统一格式
    3. 其他异常 → 交给 DRF 默认处理
    """

    # --- 1. 我们自己的异常体系 ---
    if isinstance(exc, BaseAppException):
        return render_app_exception(exc)

    # --- 2. DRF 自带的 ValidationError ---
    if isinstance(exc, DRFValidationError):
        body = {
            'type': 'validation_error',
            'code': 'VALIDATION_ERROR',
            'message': 'Request validation failed',
            'detail': exc.detail,
        }
        return JsonResponse(body, status=400)

    # --- 3. 其他的交给 DRF 默认处理 ---
    return drf_default_handler(exc, context)
