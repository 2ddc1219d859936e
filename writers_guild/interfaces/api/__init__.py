"""HTTP and websocket interface built on FastAPI."""
