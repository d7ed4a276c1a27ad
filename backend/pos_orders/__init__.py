"""Order management core for a point-of-sale backend."""
