# Repositories package init
"""
Pokedex Backend - Record Store Layer
=====================================

What:  Thin data-access objects wrapping an AsyncSession.
How:   One repository instance is built per request around that request's
       session (see `get_pokemon_repository`), so no repository state is
       shared between requests.

Repository Inventory:
    - PokemonRepository: insert, find_one, find_and_count, count, clear
"""
