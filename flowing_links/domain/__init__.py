"""
DOMAIN LAYER - The Heart of Your Application

This layer contains:
- Entities: Business objects with identity (User, Project, Label, Link)
- Value Objects: Immutable types (FavoriteFilter, LinkFilter)
- Ports: Interfaces that infrastructure implements (repositories, unit of work, hashing)
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
4. This is where business rules live
"""
