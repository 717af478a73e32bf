"""Application layer: reporting session and its policies."""
