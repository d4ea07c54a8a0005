"""Infrastructure — IO-bound implementations of the core boundary protocols."""
