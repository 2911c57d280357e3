"""funcinit: scaffolding for serverless function projects."""

__version__ = "0.1.0"
