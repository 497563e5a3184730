"""
Use cases for the Cylaba API: orders, products and schools.

Each service owns one collection store and performs the whole
load -> mutate -> save cycle for an operation. Routers call these services
instead of manipulating the JSON files directly.
"""
