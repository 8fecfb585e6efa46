"""
Version 1 of the API.

Version 1 is mounted at the application root, so its routes appear as
``/books`` and ``/books/{id}``.
"""
