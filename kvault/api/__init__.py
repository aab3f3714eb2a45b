"""HTTP API for kvault.

Blueprints:
- auth: POST /api/register, POST /api/token
- data: POST /api/data, GET/PUT/DELETE /api/data/<key> (bearer token required)

Both are registered under ``settings.api_prefix`` by ``kvault.main.create_app``.
"""
