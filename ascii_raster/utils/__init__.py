"""Small helpers shared by the renderers."""
