"""
Main application entry point for the newsletter subscription service.

This module serves as the WSGI entry point. The environment is selected with the
``ENVIRONMENT`` variable (development, testing, production).

Examples:
    $ flask --app app run
    $ gunicorn "app:create_app()"
"""

from core.factory import create_app

__all__ = ['create_app']


if __name__ == '__main__':
    create_app().run()
