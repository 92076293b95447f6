"""Diamond board: closed-form cell addressing for two stacked triangles."""
