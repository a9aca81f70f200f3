"""
Recipe catalog core package.

This package holds everything that talks to the relational store:
- models: pydantic models for recipes and list projections
- db: SQLAlchemy table definition and async engine construction
- store: RecipeStore, the parameterized query layer used by the API
- errors: exceptions raised by the store
- seed: loader for populating the recipes table from a JSON file
"""
