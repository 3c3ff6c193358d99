"""APIHub - discover, test, review, and compare public HTTP APIs."""
