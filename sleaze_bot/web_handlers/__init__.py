from . import health, results, transform

routes = [
    *transform.routes,
    *results.routes,
    *health.routes,
]

__all__ = ["routes"]
