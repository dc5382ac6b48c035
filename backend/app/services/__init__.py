# Services package init
"""
Pokedex Backend - Services Layer
=================================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services accept a repository plus plain values, apply the pagination
       rules and not-found / write-failure handling, and return schemas.

Service Inventory:
    - pagination: resolves raw limit/page into a PaginationWindow
    - PokemonService: create, list, count, lookup and delete-all operations
"""
