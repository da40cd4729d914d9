"""
FastAPI routers for the Garden Monitor presentation layer.

Each file inside this package exposes an APIRouter that app.py includes. The
routers only translate HTTP input into registry calls and registry state into
responses.
"""
