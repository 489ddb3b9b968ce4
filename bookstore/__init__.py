"""
BookStore API

A catalog of Authors and Books exposed through a FastAPI application.

Request flow:
    router -> resource service (validate, check, mutate) -> repository
           -> mapper (entity -> response DTO) -> router
"""

__version__ = "1.0.0"
