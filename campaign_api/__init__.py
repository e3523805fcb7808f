"""Campaign report store with a TTL-cached HTTP API."""
