# Routes package init
"""
Pokedex Backend - API Routes Package
=====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - pokemon.py: POST   /pokemon             (create)
                  GET    /pokemon             (paginated list)
                  GET    /pokemon/count       (total count)
                  GET    /pokemon/{name}      (lookup by name)
                  DELETE /pokemon             (delete ALL records)
    - health.py:  GET    /health              (service health check)

Routes stay thin: extract input, call the service, pick the status code.
"""
