"""
API Dependencies

Task store injection. Each application owns one store, built on first use
from the settings it was created with.
"""

from fastapi import FastAPI, Request

from tasklist.tasks import TaskStore, create_store


def store_for(app: FastAPI) -> TaskStore:
    """Get the application's task store, creating it on first use."""
    store = getattr(app.state, "store", None)
    if store is None:
        store = create_store(app.state.settings)
        app.state.store = store
    return store


def get_store(request: Request) -> TaskStore:
    """Dependency: task store of the application serving the request."""
    return store_for(request.app)
