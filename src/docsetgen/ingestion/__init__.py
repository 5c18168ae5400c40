"""Walking and classifying generated documentation trees."""
