"""
URL configuration for the task service.
"""
from django.http import HttpRequest, HttpResponse
from django.urls import path
from ninja import NinjaAPI
from ninja.errors import ValidationError

api = NinjaAPI(
    title="Task Service API",
    version="1.0.0",
    description="CRUD over the tasks table",
    docs_url="/docs",
)

from apps.tasks.api import router as tasks_router

api.add_router("/tasks", tasks_router)


@api.exception_handler(ValidationError)
def validation_error_handler(request: HttpRequest, exc: ValidationError):
    """
    Malformed path parameters are a bad request (400); body errors keep
    the 422 ninja gives them.
    """
    bad_path = any(
        err.get("loc") and err["loc"][0] == "path"
        for err in exc.errors
    )
    status = 400 if bad_path else 422
    return api.create_response(request, {"detail": exc.errors}, status=status)


def index(request: HttpRequest):
    return HttpResponse("Hello World", content_type="text/plain; charset=utf-8")


urlpatterns = [
    path('', index, name='index'),
    path('', api.urls),
]
