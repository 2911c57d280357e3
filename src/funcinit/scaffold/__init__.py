"""Project scaffolding for `funcinit init`."""
