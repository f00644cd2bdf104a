"""
Dog House API - Resource Handlers
=================================

What:  The operations behind the routes, independent of HTTP.
How:   Each handler receives a Store, performs explicit lookups, raises
       NotFoundError on a failed lookup, and returns response models built by
       rendering.py.

Handler Inventory:
    - DogHouseService.show(id)              → DogHouseWithReviews
    - ReviewService.index(parent_id=None)   → [ReviewWithDogHouse]
    - ReviewService.show(id)                → ReviewWithDogHouse
    - ReviewService.create(payload)         → ReviewResponse
"""
