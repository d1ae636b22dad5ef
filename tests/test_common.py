"""
Tests for the shared API plumbing: health check, error format, validators.
"""
from decimal import Decimal
from unittest import mock

import pytest
from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import NotFound, ValidationError
from rest_framework.test import APIRequestFactory

from apps.common.exceptions import custom_exception_handler
from apps.common.middleware import ErrorHandlingMiddleware
from apps.common.validators import MAX_POINTS, parse_points_amount


class TestHealthCheck:

    @pytest.mark.django_db
    def test_healthy(self, api_client):
        response = api_client.get('/api/health/')

        assert response.status_code == 200
        assert response.data['status'] == 'healthy'
        assert response.data['database'] == 'healthy'
        assert 'timestamp' in response.data

    @pytest.mark.django_db
    def test_database_down(self, api_client):
        with mock.patch('apps.common.health_views.connection.cursor', side_effect=DatabaseError('down')):
            response = api_client.get('/api/health/')

        assert response.status_code == 503
        assert response.data['status'] == 'unhealthy'


class TestExceptionHandler:

    def test_validation_error_carries_details(self):
        response = custom_exception_handler(ValidationError({'amount': ['Required']}), {})

        assert response.status_code == 400
        assert response.data == {
            'error': 'Invalid input',
            'code': 400,
            'details': {'amount': ['Required']},
        }

    def test_api_exception_message(self):
        response = custom_exception_handler(NotFound('Reward 7 not found'), {})

        assert response.status_code == 404
        assert response.data == {'error': 'Reward 7 not found', 'code': 404}

    def test_unexpected_exception_hidden(self):
        response = custom_exception_handler(RuntimeError('db password is hunter2'), {'view': None})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.data == {'error': 'Internal server error', 'code': 500}

    def test_unauthenticated_error_shape(self, api_client, db):
        response = api_client.get('/api/points/')

        assert response.status_code == 401
        assert response.data['code'] == 401
        assert response.data['error']
        assert response['WWW-Authenticate'].startswith('Session')


class TestErrorHandlingMiddleware:

    def test_api_path_returns_json_500(self):
        request = APIRequestFactory().get('/api/points/')
        middleware = ErrorHandlingMiddleware(lambda r: None)

        response = middleware.process_exception(request, RuntimeError('boom'))

        assert response.status_code == 500
        assert b'Internal server error' in response.content
        assert b'boom' not in response.content

    def test_non_api_path_left_to_django(self):
        request = APIRequestFactory().get('/admin/')
        middleware = ErrorHandlingMiddleware(lambda r: None)

        assert middleware.process_exception(request, RuntimeError('boom')) is None


class TestParsePointsAmount:

    @pytest.mark.parametrize('value, expected', [
        (1, 1),
        (250, 250),
        (10.0, 10),
        (Decimal('40'), 40),
        (MAX_POINTS, MAX_POINTS),
    ])
    def test_valid(self, value, expected):
        assert parse_points_amount(value) == expected

    @pytest.mark.parametrize('value', [
        0, -1, 1.5, Decimal('2.5'), Decimal('Infinity'), float('inf'), '10', True, False, None,
        MAX_POINTS + 1, 10**20,
    ])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_points_amount(value)
