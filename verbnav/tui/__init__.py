"""Terminal front-end driving the verb engine."""
