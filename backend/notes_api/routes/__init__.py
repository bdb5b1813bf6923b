# Routes package init
"""
Notes API Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - notes.py:   GET    /api/notes          (list notes)
                  GET    /api/notes/{id}     (get single note)
                  POST   /api/notes          (create note)
                  PUT    /api/notes/{id}     (update note)
                  DELETE /api/notes/{id}     (delete note)
    - health.py:  GET    /  and  /health     (liveness check)

Design Principle:
    Routes are THIN: extract data from the request, call the notes service,
    wrap the result. Business rules belong in the service.
"""
