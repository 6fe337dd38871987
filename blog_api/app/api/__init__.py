"""HTTP layer: request dependencies, endpoint routers and their aggregation."""
