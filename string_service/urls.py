from django.http import JsonResponse
from django.urls import include, path, re_path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions
from rest_framework.decorators import api_view
from rest_framework.response import Response

schema_view = get_schema_view(
    openapi.Info(
        title="String Analyzer API",
        default_version='v1',
        description="Analyze, store and query strings by their computed properties",
    ),
    public=True,
    permission_classes=(permissions.AllowAny,),
)


@api_view(['GET'])
def api_index(request):
    """
    GET /
    List the endpoints this service exposes
    """
    return Response({
        "message": "String Analyzer API",
        "version": "1.0.0",
        "endpoints": {
            "POST /strings": "Create and analyze a string",
            "GET /strings/{value}": "Get a specific string",
            "GET /strings": "Get all strings with filters",
            "GET /strings/filter-by-natural-language": "Filter using natural language",
            "DELETE /strings/{value}": "Delete a string",
        },
    })


def not_found(request, exception=None):
    return JsonResponse(
        {"error": "Not Found", "message": f"Cannot {request.method} {request.path}"},
        status=404,
    )


handler404 = not_found

urlpatterns = [
    path('', api_index, name='api_index'),
    path('', include('string_analyzer.urls')),
    re_path(r'^swagger(?P<format>\.json|\.yaml)$', schema_view.without_ui(cache_timeout=0), name='schema-json'),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
]
