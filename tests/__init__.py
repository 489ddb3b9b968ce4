"""
Test Suite for the BookStore API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_authors.py / test_books.py: HTTP tests for the /api/v1 endpoints
- test_services.py: resource services against mocked repositories
- test_repositories.py: repositories against the test database
- test_mappers.py, test_validation.py: pure mapping and validation rules
- test_app.py: health, root, configuration and error handlers

Running Tests:
    pytest
    pytest --cov=bookstore --cov-report=html
    pytest tests/test_books.py -v
"""
