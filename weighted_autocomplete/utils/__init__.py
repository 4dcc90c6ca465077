"""Shell-side helpers: dictionary loading, logging, config and metrics."""
