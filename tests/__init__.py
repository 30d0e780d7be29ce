"""
Test package for the newsletter subscription service.

Fixtures live in ``tests/conftest.py``:

- ``app``: application built with the testing configuration over an
  in-memory SQLite database, tables created and dropped around each test
- ``test_client``: Flask test client for HTTP-level tests
- ``test_db``: the Flask-SQLAlchemy handle
- ``store``: ``SubscriptionStore`` over the test session
- ``memory_store``: in-memory store with failure injection, for exercising the
  service layer without a database
- ``pending_subscriber`` / ``confirmed_subscriber``: seeded subscribers with
  their confirmation tokens
"""
