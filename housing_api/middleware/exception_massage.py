"""
Перехватчик ответов: точка расширения для обработки сообщений об ошибках.

Сейчас ничего не меняет: возвращает ответ обработчика как есть
(статус, заголовки, тело, в том числе потоковое). Логику нормализации
ошибок сюда не добавлять, пока не определён формат.
"""
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response


class ExceptionMassageInterceptor(BaseHTTPMiddleware):
    """Middleware: оборачивает каждый запрос, ответ пропускает без изменений."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        return await call_next(request)
