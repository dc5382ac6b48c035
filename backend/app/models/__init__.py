# Models package init
"""
Pokedex Backend - ORM Models
=============================

What:  SQLAlchemy models registered on `app.database.Base`.

Model Inventory:
    - Pokemon: the single persisted resource (table `pokemon`)
"""

from app.models.pokemon import Pokemon

__all__ = ["Pokemon"]
