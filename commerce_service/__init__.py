"""Commerce service: users and orders behind a layered FastAPI API"""

__version__ = "0.1.0"
