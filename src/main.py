"""Entry point: ``litestar --app main:app run``."""

from api.app import create_app

app = create_app()
