"""
FastAPI routers grouped by collection (orders, products, schools).

Each file exposes an APIRouter included by the app factory in app.py.
Endpoints call the services stored on app.state and never touch the JSON
files directly.
"""
