"""S-Todo: terminal projects and to-do lists with per-item time tracking."""
