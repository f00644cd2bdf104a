"""
Dog House API - Application Package
===================================

What: REST API for dog house listings and their reviews.
Who:  Imported by uvicorn (`doghouse_api.main:app`), Alembic, and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │      Routes (route table, HTTP)     │  ← verb + path → endpoint
    ├─────────────────────────────────────┤
    │     Services (resource handlers)    │  ← index / show / create
    ├─────────────────────────────────────┤
    │    Store, Models & Schemas (Data)   │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

Resources:
    DogHouse  1 ──< *  Review

    /dog_houses/{id}                          DogHouse.show
    /dog_houses/{dog_house_id}/reviews        Review.index (parent scoped)
    /dog_houses/{dog_house_id}/reviews/{id}   Review.show
    /reviews, /reviews/{id}                   Review.index / show / create
"""

__version__ = "1.0.0"
