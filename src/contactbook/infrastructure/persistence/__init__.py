"""File-backed document stores."""
