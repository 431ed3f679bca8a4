import logging

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from drf_yasg.utils import swagger_auto_schema
from drf_yasg import openapi

from .exceptions import ErrorKind, StringAnalyzerError
from .filters import select
from .nlp import translate
from .serializers import (
    NaturalLanguageQuerySerializer,
    StringAnalyzeSerializer,
    StringFilterSerializer,
    StringRecordSerializer,
)

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ErrorKind.INVALID_INPUT: status.HTTP_400_BAD_REQUEST,
    ErrorKind.ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.UNTRANSLATABLE: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICTING_FILTERS: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def error_response(exc, **extra):
    body = {"error": exc.message}
    body.update(extra)
    return Response(body, status=ERROR_STATUS[exc.kind])


def internal_error_response(e):
    return Response({
        "error": "Internal server error",
        "details": str(e),
    }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)


class StoreMixin:
    """The RecordStore is handed in through as_view(store=...)."""
    store = None

    def get_store(self):
        if self.store is None:
            raise RuntimeError(f"{type(self).__name__} was created without a store")
        return self.store


# 1️⃣ POST & GET /strings


class StringAnalyzerView(StoreMixin, APIView):

    @swagger_auto_schema(
        request_body=StringAnalyzeSerializer,
        operation_summary="Analyze and store a new string",
        responses={201: "Created", 400: "Bad request", 409: "Conflict", 422: "Invalid type"},
    )
    def post(self, request):
        serializer = StringAnalyzeSerializer(data=request.data, context={"store": self.get_store()})
        if not serializer.is_valid():
            codes = serializer.errors.get('value', [])
            if any(getattr(err, 'code', None) == 'invalid_type' for err in codes):
                return Response(serializer.errors, status=status.HTTP_422_UNPROCESSABLE_ENTITY)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            record = serializer.save()
        except StringAnalyzerError as e:
            return error_response(e)
        except Exception as e:
            logger.exception("Unexpected error while storing string: %s", e)
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
    )
    def get(self, request):
        # a plain dict, so missing booleans stay missing instead of reading as False
        params = StringFilterSerializer(data=request.query_params.dict())
        if not params.is_valid():
            return Response({
                "error": "Invalid query parameter values or types",
                "details": params.errors,
            }, status=status.HTTP_400_BAD_REQUEST)

        filter_set = params.to_filter_set()
        try:
            result = select(self.get_store(), filter_set)
        except Exception as e:
            logger.exception("Unexpected error while filtering strings: %s", e)
            return internal_error_response(e)

        return Response({
            "data": StringRecordSerializer(result.records, many=True).data,
            "count": result.count,
            "filters_applied": filter_set.as_dict(),
        }, status=status.HTTP_200_OK)

# 2️⃣ GET &  DELETE  /strings/{string_value}


class StringDetailView(StoreMixin, APIView):

    @swagger_auto_schema(operation_summary="Get a single analyzed string")
    def get(self, request, value):
        try:
            record = self.get_store().get(value)
        except StringAnalyzerError as e:
            return error_response(e)

        return Response(StringRecordSerializer(record).data, status=status.HTTP_200_OK)

    @swagger_auto_schema(operation_summary="Delete an analyzed string")
    def delete(self, request, value):
        try:
            self.get_store().delete(value)
        except StringAnalyzerError as e:
            return error_response(e)
        return Response(status=status.HTTP_204_NO_CONTENT)


# 3️⃣ GET /strings/filter-by-natural-language

class NaturalLanguageFilterView(StoreMixin, APIView):
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
    )
    def get(self, request):
        params = NaturalLanguageQuerySerializer(data=request.query_params.dict())
        if not params.is_valid():
            return Response(
                {"error": "Query parameter is required."},
                status=status.HTTP_400_BAD_REQUEST
            )

        query = params.validated_data["query"]
        try:
            translated = translate(query)
        except StringAnalyzerError as e:
            return error_response(e, interpreted_query={
                "original": query,
                "parsed_filters": e.context.get("parsed_filters", {}),
            })

        try:
            result = select(self.get_store(), translated.filters)
        except Exception as e:
            logger.exception("Unexpected error while filtering strings for %r: %s", query, e)
            return internal_error_response(e)

        return Response({
            "data": StringRecordSerializer(result.records, many=True).data,
            "count": result.count,
            "interpreted_query": translated.as_dict(),
        }, status=status.HTTP_200_OK)
