"""EdChoice Expansion award estimator."""
