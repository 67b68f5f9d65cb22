"""Web Server Gateway Interface entry-point."""

from movie_catalog.app import create_app

app = create_app()
