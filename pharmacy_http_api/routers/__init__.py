"""
HTTP routers mounted by ``pharmacy_http_api.main``.
"""
