import logging

from django.apps import apps
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .errors import (
    ConflictingFiltersError,
    DuplicateValueError,
    InvalidFilterValueError,
    MissingFieldError,
    NotFoundError,
    StringAnalyzerError,
    TypeMismatchError,
    UnparseableQueryError,
)
from .serializers import StringAnalyzeSerializer, StringRecordSerializer

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    MissingFieldError: status.HTTP_400_BAD_REQUEST,
    TypeMismatchError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    DuplicateValueError: status.HTTP_409_CONFLICT,
    ConflictingFiltersError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    UnparseableQueryError: status.HTTP_400_BAD_REQUEST,
    InvalidFilterValueError: status.HTTP_400_BAD_REQUEST,
}

error_schema = openapi.Schema(
    type=openapi.TYPE_OBJECT,
    properties={'error': openapi.Schema(type=openapi.TYPE_STRING)},
)


def error_response(exc, **extra):
    body = {"error": str(exc)}
    if isinstance(exc, InvalidFilterValueError):
        body["details"] = exc.errors
    body.update(extra)
    return Response(body, status=ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR))


def internal_error_response(exc):
    logger.exception("Unexpected error while handling string request: %s", exc)
    return Response({"error": "Internal server error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class RepositoryMixin:
    # Overridable per route with ``as_view(repository=...)``
    repository = None

    def get_repository(self):
        if self.repository is not None:
            return self.repository
        return apps.get_app_config('string_analyzer').repository


# 1️⃣ POST & GET /strings


class StringAnalyzerView(RepositoryMixin, APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={201: StringRecordSerializer, 400: error_schema, 409: error_schema, 422: error_schema},
    )
    def post(self, request):
        # Malformed bodies raise ParseError here and DRF answers 400
        data = request.data
        try:
            record = services.create_string(self.get_repository(), data)
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            return internal_error_response(e)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_201_CREATED)

    @swagger_auto_schema(
        operation_summary="List all analyzed strings",
        manual_parameters=[
            openapi.Parameter(
                "is_palindrome",
                openapi.IN_QUERY,
                description="Filter by palindrome (true/false)",
                type=openapi.TYPE_BOOLEAN,
            ),
            openapi.Parameter(
                "min_length",
                openapi.IN_QUERY,
                description="Minimum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "max_length",
                openapi.IN_QUERY,
                description="Maximum string length",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "word_count",
                openapi.IN_QUERY,
                description="Exact word count",
                type=openapi.TYPE_INTEGER,
            ),
            openapi.Parameter(
                "contains_character",
                openapi.IN_QUERY,
                description="Filter strings that contain this character",
                type=openapi.TYPE_STRING,
            ),
        ],
        responses={400: error_schema},
    )
    def get(self, request):
        try:
            records, filters = services.list_strings(
                self.get_repository(), request.query_params.dict())
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            return internal_error_response(e)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "filters_applied": filters.as_dict(),
        }, status=status.HTTP_200_OK)

# 2️⃣ GET &  DELETE  /strings/{string_value}


class StringDetailView(RepositoryMixin, APIView):

    @swagger_auto_schema(
        operation_summary="Get a stored string by its exact value",
        responses={200: StringRecordSerializer, 404: error_schema},
    )
    def get(self, request, value):
        try:
            record = services.get_string(self.get_repository(), value)
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            return internal_error_response(e)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(
        operation_summary="Delete a stored string by its exact value",
        responses={204: 'String deleted', 404: error_schema},
    )
    def delete(self, request, value):
        try:
            services.delete_string(self.get_repository(), value)
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            return internal_error_response(e)

        return Response(status=status.HTTP_204_NO_CONTENT)


# 3️⃣ GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(RepositoryMixin, APIView):
    @swagger_auto_schema(
        operation_summary="Filter analyzed strings using natural language queries",
        manual_parameters=[
            openapi.Parameter(
                "query",
                openapi.IN_QUERY,
                description="Natural language query, e.g. 'all single word palindromic strings'",
                type=openapi.TYPE_STRING,
                required=True,
            )
        ],
        responses={400: error_schema, 422: error_schema},
    )
    def get(self, request):
        query = request.query_params.get("query")

        try:
            records, filters = services.filter_by_natural_language(self.get_repository(), query)
        except ConflictingFiltersError as e:
            return error_response(e, interpreted_query={
                "original": query,
                "parsed_filters": e.filters or {},
            })
        except UnparseableQueryError as e:
            return error_response(e, interpreted_query={
                "original": query,
                "parsed_filters": {},
            })
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            return internal_error_response(e)

        return Response({
            "data": StringRecordSerializer(records, many=True).data,
            "count": len(records),
            "interpreted_query": {
                "original": query,
                "parsed_filters": filters.as_dict(),
            }
        }, status=status.HTTP_200_OK)
