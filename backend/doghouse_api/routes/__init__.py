"""
Dog House API - Routes Package
==============================

What:  HTTP endpoints and the table that maps (verb, path) onto them.

Route Inventory (see table.py):
    GET  /dog_houses/{id}                          dog_houses.show_dog_house
    GET  /dog_houses/{dog_house_id}/reviews        reviews.list_reviews   (parent scope)
    GET  /dog_houses/{dog_house_id}/reviews/{id}   reviews.show_review    (parent scope)
    GET  /reviews                                  reviews.list_reviews
    GET  /reviews/{id}                             reviews.show_review
    POST /reviews                                  reviews.create_review
    GET  /health                                   health.health_check

Endpoints stay thin: read the request, call a service, return its model.
"""
