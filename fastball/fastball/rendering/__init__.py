"""Template discovery, preprocessing, rendering and output."""
