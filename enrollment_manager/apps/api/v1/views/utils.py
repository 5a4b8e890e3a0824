"""
Utilities for REST API View and Viewset classes.
"""
from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


class PaginationWithPageCount(PageNumberPagination):
    """
    A PageNumber paginator that adds the total number of pages
    and the current page to the paginated response.
    """

    page_size_query_param = 'page_size'
    page_size = settings.REST_FRAMEWORK.get('PAGE_SIZE')
    max_page_size = 500

    def get_paginated_response(self, data):
        return Response({
            'count': self.page.paginator.count,
            'num_pages': self.page.paginator.num_pages,
            'current_page': self.page.number,
            'next': self.get_next_link(),
            'previous': self.get_previous_link(),
            'results': data,
        })

    def get_paginated_response_schema(self, schema):
        """
        Annotate the paginated response schema with ``num_pages`` and ``current_page``,
        ensuring these extra fields show up in the DRF Spectacular generated docs.
        """
        response_schema = super().get_paginated_response_schema(schema)
        response_schema['properties']['num_pages'] = {
            'type': 'integer',
            'description': 'The total number of pages',
            'example': 3,
        }
        response_schema['properties']['current_page'] = {
            'type': 'integer',
            'description': 'The current page number',
            'example': 1,
        }
        return response_schema
