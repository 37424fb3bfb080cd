"""
统一异常体系。

所有业务异常继承 BaseAppException，包含：
- type:        错误类型标识（validation_error / block / intake）
- code:        业务错误码（MALFORMED_REQUEST / HIGHER_LEVEL_REVIEW_NOT_FOUND / ...）
- message:     人类可读的描述
- detail:      可选的附加信息（dict / list / None）
- http_status: HTTP 状态码

V3 intake 的错误（IntakeApiError 及子类）另带一个 errors 列表，
每一项都是 (status, code, title) 三元组，按 V3 的 wire 格式渲染。

View 层只需 raise，exception_handler 统一捕获并格式化响应。
"""


class BaseAppException(Exception):
    """所有业务异常的基类。"""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    http_status = 500

    def __init__(self, message, code=None, detail=None, http_status=None):
        self.message = message
        if code is not None:
            self.code = code
        if http_status is not None:
            self.http_status = http_status
        self.detail = detail
        super().__init__(message)


class ValidationError(BaseAppException):
    """输入验证失败，400。"""

    type = 'validation_error'
    code = 'VALIDATION_ERROR'
    http_status = 400


class MalformedRequestError(ValidationError):
    """
    请求体结构不完整（缺 data / attributes / relationships / included 等）。

    在逐条 issue 校验之前就失败，不会进入 batch 累积流程。
    """

    code = 'MALFORMED_REQUEST'


class BlockError(BaseAppException):
    """业务规则阻止操作。service 层抛出，409。"""

    type = 'block'
    code = 'BUSINESS_BLOCK'
    http_status = 409


class IntakeApiError(BaseAppException):
    """
    V3 intake 的错误集合。

    errors 是 IntakeError 三元组列表；http_status / code / message
    取第一个 error，响应体由 exception_handler 渲染成
    {"errors": [{"status", "code", "title"}, ...]}。
    """

    type = 'intake'
    code = 'INTAKE_ERROR'
    http_status = 422

    def __init__(self, errors, message=None, detail=None):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(
            message or (first.title if first else 'Intake failed'),
            code=first.code if first else None,
            detail=detail,
            http_status=first.status if first else None,
        )


class StartError(IntakeApiError):
    """intake 的 start 阶段失败（veteran 不存在、重复 intake 等）。"""

    code = 'intake_start_failed'


class ReviewError(IntakeApiError):
    """intake 的 review 阶段失败（receipt date、benefit type、payee code 非法）。"""

    code = 'intake_review_failed'


class CompleteError(IntakeApiError):
    """intake 的 complete 阶段失败（request issue 无法落库）。"""

    code = 'intake_complete_failed'
