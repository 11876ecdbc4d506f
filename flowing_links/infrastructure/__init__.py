"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: Database implementations (SQLAlchemy repositories, unit of work)
- security/: JWT token service and bcrypt password hasher
"""
