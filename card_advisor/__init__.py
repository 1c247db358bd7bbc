"""Credit card catalog, favorites and guided recommendation API."""
