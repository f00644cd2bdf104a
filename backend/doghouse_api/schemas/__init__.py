"""
Dog House API - Pydantic Schemas
================================

resources.py: request/response representations of DogHouse and Review.
common.py:    error and health payloads shared by every route.
"""
