"""
Pydantic schema definitions for API payloads.

Members, portfolios and comments each define their own request and
response models.  Schemas are separated from the database tables so
the API representation (camelCase keys, public fields only) can
differ from what is stored.
"""
