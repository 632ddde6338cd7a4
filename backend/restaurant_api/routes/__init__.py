# Routes package init
"""
NYB Restaurant Backend — API Routes Package
=============================================

Route Inventory:
    - menu.py:    GET    /menu              (list menu items)
                  POST   /addMenuItem       (add a menu item)
                  PATCH  /items/{itemId}    (set isAvailable)
                  DELETE /menu/{id}         (delete a menu item)
    - orders.py:  GET    /orders            (list orders)
                  POST   /orders            (place an order)
                  PATCH  /orders/{orderId}  (set status)
    - health.py:  GET    /                  (plain-text liveness)
                  GET    /health            (store connectivity)

Routes are thin: they pull parameters off the request, call a service with
the injected DocumentStore and let the global handlers format errors.
"""
