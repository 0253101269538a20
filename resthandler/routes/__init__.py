# Routes package init
"""
resthandler: API Routes Package
===============================

Route Inventory:
    - resources.py: CRUD routes generated for each registered handler
                    under {api_prefix}/{version}/{resource_name}
    - health.py:    GET /health (service health check)

Routes stay thin: they build the RequestContext and Payload, call the
handler, and leave status-code mapping to the global exception handlers.
"""
