"""HTTP layer: routers, endpoint modules and request helpers."""
