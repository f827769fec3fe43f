"""
Domain package for the Address Gateway.

Request-scoped address models and the response envelopes built from them.
Nothing here outlives a single request.
"""
