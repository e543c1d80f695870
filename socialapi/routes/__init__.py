# Routes package init
"""
Social API: API Routes Package
================================

Route Inventory:
    - accounts.py:  POST /register, POST /login
    - messages.py:  POST/GET /messages, GET/DELETE/PATCH /messages/{message_id},
                    GET /accounts/{account_id}/messages
    - health.py:    GET /health
    - responses.py: error and empty-body response helpers

Routes stay thin: parse the request, call one service, map the Result to a
status code.
"""
