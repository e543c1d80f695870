"""
Social API: Application Package
=================================

What: A small social-media backend. Accounts register and log in; accounts
      post, edit, delete and list short text messages.

Architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │       Services (Business Logic)     │  ← validation, permissions, Results
    ├─────────────────────────────────────┤
    │      Repositories (Persistence)     │  ← one statement per call, StorageError
    ├─────────────────────────────────────┤
    │   Models & Schemas / Database       │  ← SQLAlchemy rows, Pydantic entities
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
